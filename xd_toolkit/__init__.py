"""Parser for Adobe XD design containers.

Front-ends should depend on the public API exposed here rather than importing
internal modules directly.
"""

from .core.cache import ResourceCache
from .core.container import XdArtboard, XdFile
from .core.exceptions import EntryNotFoundError, ResourceMissingError, XdFormatError, XdParserError

__all__: list[str] = [
    "ResourceCache",
    "XdArtboard",
    "XdFile",
    "EntryNotFoundError",
    "ResourceMissingError",
    "XdFormatError",
    "XdParserError",
]
