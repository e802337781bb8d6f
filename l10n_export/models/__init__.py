"""Data models for the localization export."""

from .documents import Scalar, LanguageDocument, FlatEntry, CollectionExport
from .artifact import OutputArtifact

__all__ = [
    "Scalar",
    "LanguageDocument",
    "FlatEntry",
    "CollectionExport",
    "OutputArtifact",
]
