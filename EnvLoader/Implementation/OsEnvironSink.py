import os
from EnvLoader.Interface.IEnvSink import IEnvSink

import logging
logger = logging.getLogger(__name__)

"""Sink that writes pairs into the process environment.
    Args:
        override: when False, variables already present in os.environ at
            construction time are left untouched. Keys introduced by the
            current load can still be overwritten by later files.
"""
class OsEnvironSink(IEnvSink):
    def __init__(self, override: bool = True):
        self.override = override
        self._protected = frozenset() if override else frozenset(os.environ)

    def set(self, key: str, value: str) -> None:
        if key in self._protected:
            logger.debug("Keeping existing environment value for %s", key)
            return
        os.environ[key] = value
