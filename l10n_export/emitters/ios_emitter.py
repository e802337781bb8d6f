"""Emitter for iOS `.strings` files."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from .base import Emitter, format_value
from ..config import Platform
from ..models.documents import FlatEntry


class IosStringsEmitter(Emitter):
    """
    Writes `"key" = value` lines under a generated header comment.

    Values are neither quoted nor escaped and lines carry no trailing `;`,
    so the output is only valid `.strings` syntax for values that are
    already quoted in the database.
    """

    platform = Platform.IOS

    def __init__(
        self,
        app_name: str = "Ducky",
        generator_url: str = "https://hub.docker.com/r/fnnzzz/ducky-localize",
        generated_at: Optional[datetime] = None,
    ):
        self.app_name = app_name
        self.generator_url = generator_url
        # Fixed at construction so every language of a run gets the same header
        self.generated_at = generated_at or datetime.now(timezone.utc)

    def file_name(self, label: str) -> str:
        return f"Localizable_{label.upper()}.strings"

    def render(self, entries: Sequence[FlatEntry]) -> str:
        lines = [f'"{entry.key}" = {format_value(entry.value)}' for entry in entries]
        return "\n".join([self.header(), *lines])

    def header(self) -> str:
        return (
            "/*\n"
            "\tLocalizable.strings\n"
            f"\t{self.app_name}\n"
            f"\tCreated by {self.generator_url}\n"
            f"\ton {_timestamp(self.generated_at)}\n"
            "*/\n\n"
        )


def _timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-05-01T10:20:30.123Z."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
