"""Emitter for web JSON resources."""

import json
from typing import Dict, Sequence

from .base import Emitter
from ..config import Platform
from ..models.documents import FlatEntry, Scalar


class JsonEmitter(Emitter):
    """Merges all entries into one pretty-printed JSON object."""

    platform = Platform.WEB

    def file_name(self, label: str) -> str:
        return f"localization-{label}.json"

    def render(self, entries: Sequence[FlatEntry]) -> str:
        """
        Convert entries to a JSON object string.

        Duplicate keys keep their first position but take the last value.
        """
        return json.dumps(self._to_dict(entries), indent=2, ensure_ascii=False)

    def _to_dict(self, entries: Sequence[FlatEntry]) -> Dict[str, Scalar]:
        data: Dict[str, Scalar] = {}
        for entry in entries:
            data[entry.key] = entry.value
        return data
