"""
Line parser for env files.

Grammar, one entry per line:
    KEY=VALUE          # trailing comments are removed
    KEY = "value"      # one layer of matching quotes is removed
    ## whole-line comments and blank lines produce nothing

Comments are stripped from the whole line before it is split on '=', so a
'#' anywhere, even inside quotes, ends the line. Lines without '=' or with an
empty key are skipped without error.
"""
from typing import List, Optional

from EnvLoader.Model.Pair import Pair

COMMENT_CHAR = "#"
SEPARATOR = "="
QUOTE_CHARS = ('"', "'")
# ASCII whitespace only; str.strip() with no argument also eats unicode spaces
WHITESPACE = " \t\n\r\x0b\x0c"


def strip_comment(line: str) -> str:
    return line.split(COMMENT_CHAR, 1)[0]


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes, if present."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        return value[1:-1]
    return value


def parse_line(line: str) -> Optional[Pair]:
    """Parse a single line into a Pair, or None when it holds no entry."""
    content = strip_comment(line)
    if not content.strip(WHITESPACE):
        return None
    if SEPARATOR not in content:
        return None
    key_part, value_part = content.split(SEPARATOR, 1)
    key = key_part.strip(WHITESPACE)
    if not key:
        return None
    value = strip_quotes(value_part.strip(WHITESPACE))
    return Pair(key=key, value=value)


def parse(text: str) -> List[Pair]:
    """Parse env file text into pairs, in line order.

    Args:
        text: full file contents

    Returns:
        List of Pair, one per valid line. Duplicate keys are all kept.
    """
    pairs = []
    for line in text.split("\n"):
        pair = parse_line(line)
        if pair is not None:
            pairs.append(pair)
    return pairs
