from __future__ import annotations
import io
import json
import os
from typing import Any, Dict, Optional
import yaml


class Resource:
    """
    Simple string resource, i.e. a dictionary of keys to (e.g. localized) strings,
    used to fill in argument descriptions; see CommandLineParser.fill_descriptions_from_resource.
    """
    def __init__(self, strings: Optional[Dict[str, str]] = None) -> None:
        self._strings = {key: str(value) for key, value in strings.items()} if isinstance(strings, dict) else {}

    @staticmethod
    def load(file: str) -> Resource:
        if not isinstance(data := load_data_file(file), dict):
            raise ValueError(f"Resource file must contain a dictionary: {file}")
        return Resource(data)

    def get_string(self, key: str) -> str:
        return self._strings.get(key, key)

    def __contains__(self, key: str) -> bool:
        return key in self._strings

    def __len__(self) -> int:
        return len(self._strings)


def load_data_file(file: str) -> Any:
    """
    Loads the given YAML (.yaml or .yml) or JSON (anything else) file.
    """
    file = os.path.expanduser(str(file))
    with io.open(file, "r") as f:
        if file.endswith(".yaml") or file.endswith(".yml"):
            return yaml.safe_load(f)
        return json.load(f)
