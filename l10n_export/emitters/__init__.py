"""Output format emitters."""

from .base import Emitter, format_value
from .json_emitter import JsonEmitter
from .android_emitter import AndroidXmlEmitter
from .ios_emitter import IosStringsEmitter
from ..config import Platform

__all__ = [
    "Emitter",
    "format_value",
    "JsonEmitter",
    "AndroidXmlEmitter",
    "IosStringsEmitter",
    "get_emitter",
]


def get_emitter(platform: Platform, **options) -> Emitter:
    """Return the emitter for a platform. Extra options go to the emitter constructor."""
    if platform is Platform.WEB:
        return JsonEmitter()
    if platform is Platform.ANDROID:
        return AndroidXmlEmitter()
    if platform is Platform.IOS:
        return IosStringsEmitter(**options)
    raise ValueError(f"No emitter for platform: {platform}")
