"""Common interface of the output format emitters."""

from typing import ClassVar, Sequence

from ..config import Platform
from ..models.documents import FlatEntry, Scalar


class Emitter:
    """Renders flattened entries of one language into a file body."""

    platform: ClassVar[Platform]

    def file_name(self, label: str) -> str:
        """Name of the artifact for a language label such as "en" or "uk"."""
        raise NotImplementedError

    def render(self, entries: Sequence[FlatEntry]) -> str:
        """Serialize entries, in order, into the file content."""
        raise NotImplementedError


def format_value(value: Scalar) -> str:
    """Render a scalar the way it appears in text resources.

    `True`, `None` and `2.0` become `true`, `null` and `2`.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
