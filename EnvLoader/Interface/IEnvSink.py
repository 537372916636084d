"""
Environment sink abstraction.
A sink receives parsed key/value pairs in order and stores them somewhere:
the process environment, a dict, or anything else a caller wants to mock.
Setting a key that was set before overwrites it.
"""

from abc import ABC, abstractmethod


class IEnvSink(ABC):
    """Abstract key/value sink interface."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass
