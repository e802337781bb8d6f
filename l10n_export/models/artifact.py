"""Data model for generated output files."""

from dataclasses import dataclass

from ..config import Platform


@dataclass
class OutputArtifact:
    """A fully rendered output file for one (language, platform) pair."""

    platform: Platform
    language: str  # output label, e.g. "uk"
    file_name: str
    content: str
    entry_count: int = 0

    @property
    def size_bytes(self) -> int:
        return len(self.content.encode("utf-8"))
