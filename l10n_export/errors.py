"""Errors raised while exporting localization strings."""

import json
from typing import Any, List, Mapping


class ExportError(Exception):
    """Base class for every export failure."""


class ConfigError(ExportError):
    """Required configuration is missing or invalid."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class DataShapeError(ExportError):
    """Documents in a collection do not have the expected structure."""

    def __init__(self, message: str, collection: str):
        self.collection = collection
        super().__init__(message)


class MissingLanguageField(DataShapeError):
    """A document of the collection has no `lang` field."""

    def __init__(self, collection: str, document: Mapping[str, Any]):
        self.document = document
        super().__init__(
            f"Document should have a `lang` property\n{collection}: {_dump(document)}",
            collection,
        )


class NoMatchingDocument(DataShapeError):
    """No document of the collection is written in the requested language."""

    def __init__(self, collection: str, language: str):
        self.language = language
        super().__init__(
            f"Collection {collection!r} has no document for lang {language!r}",
            collection,
        )


class ShapeMismatch(DataShapeError):
    """Language variants of a collection have different key counts."""

    def __init__(self, collection: str, counts: Mapping[str, int]):
        self.counts = dict(counts)
        details = ", ".join(f"{lang}={count}" for lang, count in self.counts.items())
        super().__init__(
            "Document should have the same count of properties for different languages\n"
            f"{collection}: {details}",
            collection,
        )


class StoreError(ExportError):
    """The document store could not be reached or read."""


class ArtifactWriteError(ExportError):
    """An output artifact could not be written."""


def _dump(document: Mapping[str, Any]) -> str:
    return json.dumps(document, ensure_ascii=False, default=str)
