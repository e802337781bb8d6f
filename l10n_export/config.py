"""Configuration management for the localization export."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


class Platform(str, Enum):
    """Target platform of an export run."""
    WEB = "web"
    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def parse(cls, value: str) -> Optional["Platform"]:
        """Return the platform for a config value, or None if unknown."""
        value = (value or "").strip().lower()
        if value == "js":  # legacy name of the web platform
            return cls.WEB
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class TargetLanguage:
    """A language to export: `code` as stored in documents, `label` as used in file names."""

    code: str
    label: str


@dataclass
class Config:
    """Export configuration."""

    # Credentials
    db_password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))
    db_user: str = field(default_factory=lambda: os.getenv("DB_USER", "duckyapp"))
    db_host: str = field(
        default_factory=lambda: os.getenv("DB_HOST", "ducky-localization.aijpw.mongodb.net")
    )
    mongodb_uri: str = field(default_factory=lambda: os.getenv("MONGODB_URI", ""))

    # Export settings
    platform: str = field(default_factory=lambda: os.getenv("PLATFORM", ""))
    output_dir: Path = field(
        default_factory=lambda: Path(os.getenv("OUTPUT_DIR", "./localization-artifacts"))
    )

    # Source language first; the second one is stored as "ua" but published as "uk"
    languages: List[TargetLanguage] = field(default_factory=lambda: [
        TargetLanguage(code="en", label="en"),
        TargetLanguage(code="ua", label="uk"),
    ])

    # iOS header
    app_name: str = "Ducky"
    generator_url: str = "https://hub.docker.com/r/fnnzzz/ducky-localize"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.db_password:
            errors.append("Please provide DB_PASSWORD env variable")
        if Platform.parse(self.platform) is None:
            errors.append("Please specify a target platform (PLATFORM=web|android|ios)")
        if len(self.languages) < 2:
            errors.append("At least two languages are required for an export")
        return errors

    @property
    def target_platform(self) -> Platform:
        platform = Platform.parse(self.platform)
        if platform is None:
            raise ValueError(f"Unknown platform: {self.platform!r}")
        return platform

    @property
    def database_name(self) -> str:
        """Web strings live in the `web` database, mobile ones in `app`."""
        return "web" if self.target_platform is Platform.WEB else "app"

    @property
    def mongo_uri(self) -> str:
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}/?retryWrites=true&w=majority"
        )
