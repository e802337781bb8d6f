"""Export localization strings from MongoDB into web, Android and iOS resource files."""

__version__ = "0.1.0"
