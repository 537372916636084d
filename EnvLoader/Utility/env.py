"""Environment helpers (env file reading and loading)"""
import os
import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from EnvLoader.Model.Pair import Pair
from EnvLoader.Parser.line_parser import parse
from EnvLoader.Interface.IEnvSink import IEnvSink
from EnvLoader.Implementation.OsEnvironSink import OsEnvironSink

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

PathType = Union[str, os.PathLike]
SinkType = Union[IEnvSink, Callable[[str, str], None]]


def _resolve_setter(sink: SinkType) -> Callable[[str, str], None]:
    if isinstance(sink, IEnvSink):
        return sink.set
    if callable(sink):
        return sink
    raise TypeError(f"sink must be an IEnvSink or a callable, got {type(sink).__name__}")


def read_env_file(path: PathType) -> str:
    """Read a whole env file as UTF-8 text. Read errors propagate."""
    env_path = Path(path).expanduser()
    with open(env_path, "r", encoding="utf-8") as f:
        return f.read()


def parse_and_set(text: str, sink: SinkType) -> List[Pair]:
    """Parse env text and hand every pair to the sink, in order.

    Args:
        text: env file contents
        sink: IEnvSink instance or any callable taking (key, value)

    Returns:
        The pairs that were applied
    """
    setter = _resolve_setter(sink)
    pairs = parse(text)
    for pair in pairs:
        setter(pair.key, pair.value)
    return pairs


def load_env_from(
    paths: Union[PathType, Iterable[PathType]],
    sink: Optional[SinkType] = None,
    ignore_missing: bool = False,
) -> List[Pair]:
    """Load env files from most general to most specific.

    Later files override earlier ones. Secret or user specific files
    therefore belong at the end of the list.

    Pairs are applied as each file is parsed. If the sink rejects a pair
    (os.environ raises ValueError for a NUL byte in a key or value), the
    error propagates and pairs applied before it stay applied.

    Args:
        paths: ordered file paths, or a single path
        sink: where pairs are applied (default: the process environment)
        ignore_missing: skip files that do not exist instead of raising

    Returns:
        Every applied pair in file-then-line order
    """
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]
    setter = _resolve_setter(sink if sink is not None else OsEnvironSink())

    entries: List[Pair] = []
    for path in paths:
        try:
            text = read_env_file(path)
        except FileNotFoundError:
            if not ignore_missing:
                raise
            logger.debug("env file not found, skipping: %s", path)
            continue
        pairs = parse_and_set(text, setter)
        logger.debug("Loaded %d entries from %s", len(pairs), path)
        entries.extend(pairs)
    return entries


def load_env_file(filepath: PathType = DEFAULT_ENV_FILE, override: bool = True) -> List[Pair]:
    """Load a single optional env file into os.environ. A missing file is not an error."""
    return load_env_from([filepath], sink=OsEnvironSink(override=override), ignore_missing=True)
