"""Flattening of language documents into qualified keys."""

from typing import List

from ..models.documents import FlatEntry, LanguageDocument

ID_FIELD = "_id"


def flatten(collection_name: str, document: LanguageDocument) -> List[FlatEntry]:
    """Turn every field but the identity into a `{collection}_{key}` entry, in document order."""
    return [
        FlatEntry(key=f"{collection_name}_{key}", value=value)
        for key, value in document.fields.items()
        if key != ID_FIELD
    ]
