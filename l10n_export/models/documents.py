"""Data models for localization documents and their flattened entries."""

from dataclasses import dataclass, field
from typing import Dict, List, Union

Scalar = Union[str, int, float, bool, None]


@dataclass
class LanguageDocument:
    """One language variant of a collection, with the `lang` field removed."""

    collection: str
    lang: str
    fields: Dict[str, Scalar] = field(default_factory=dict)

    @property
    def key_count(self) -> int:
        """Number of fields, the identity field included."""
        return len(self.fields)


@dataclass(frozen=True)
class FlatEntry:
    """A single `{collection}_{key}` -> value pair."""

    key: str
    value: Scalar


@dataclass
class CollectionExport:
    """Flattened entries of one collection, keyed by language code."""

    name: str
    entries: Dict[str, List[FlatEntry]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(self.entries.values())

    def entries_for(self, language: str) -> List[FlatEntry]:
        return self.entries.get(language, [])
