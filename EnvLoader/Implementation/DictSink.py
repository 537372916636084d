from typing import Dict, Optional
from EnvLoader.Interface.IEnvSink import IEnvSink

"""In-memory sink used for tests and dry runs."""
class DictSink(IEnvSink):
    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = values if values is not None else {}

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)
