"""Core parsing layer: archive access, decoding, caching and assembly."""

from .cache import ResourceCache, normalize_resource_path
from .container import XdArtboard, XdFile
from .exceptions import EntryNotFoundError, ResourceMissingError, XdFormatError, XdParserError

__all__ = [
    "ResourceCache",
    "normalize_resource_path",
    "XdArtboard",
    "XdFile",
    "EntryNotFoundError",
    "ResourceMissingError",
    "XdFormatError",
    "XdParserError",
]
