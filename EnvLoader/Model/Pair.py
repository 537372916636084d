from dataclasses import dataclass

"""A single key/value entry parsed from one line of an env file."""
@dataclass(frozen=True)
class Pair:
    key: str
    value: str
