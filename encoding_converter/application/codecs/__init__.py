"""Per-format codecs and the registry that binds them to FormatId."""
from .base import Codec
from .registry import DEFAULT_REGISTRY, FormatRegistry, get_codec, list_formats

__all__ = ["Codec", "DEFAULT_REGISTRY", "FormatRegistry", "get_codec", "list_formats"]
