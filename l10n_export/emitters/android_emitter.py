"""Emitter for Android string resources."""

from typing import Sequence

from .base import Emitter, format_value
from ..config import Platform
from ..models.documents import FlatEntry

XML_PREFIX = '<?xml version="1.0" encoding="utf-8"?>\n<resources>\n\n'
XML_POSTFIX = "\n\n</resources>"


class AndroidXmlEmitter(Emitter):
    """Writes every entry as a `<string>` element of a single `<resources>` block."""

    platform = Platform.ANDROID

    def file_name(self, label: str) -> str:
        return f"localization-{label}.xml"

    def render(self, entries: Sequence[FlatEntry]) -> str:
        # Values are written as-is: `&`, `<` and apostrophes are not escaped.
        lines = [
            f'<string name="{entry.key}">{format_value(entry.value)}</string>'
            for entry in entries
        ]
        return "\n".join([XML_PREFIX, *lines, XML_POSTFIX])
