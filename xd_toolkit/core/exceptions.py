from __future__ import annotations

"""Exception classes raised while reading XD containers.

Every error carries the archive entry (or asset id) it is about and, when it
wraps a lower-level failure, the original exception as ``cause``.
"""

from typing import Optional

__all__ = [
    "XdParserError",
    "EntryNotFoundError",
    "XdFormatError",
    "ResourceMissingError",
]


class XdParserError(Exception):
    """Base exception for all container parsing errors."""

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message} ({self.cause})"
        return message


class EntryNotFoundError(XdParserError):
    """Raised when the archive has no entry at the requested path."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Archive entry not found: {entry}", entry)
        self.entry = entry


class XdFormatError(XdParserError):
    """Raised when a document cannot be decoded or lacks a mandatory part.

    This covers invalid JSON, schema mismatches, a manifest without its
    ``artwork`` node and artboard documents without a resources reference.
    """
    pass


class ResourceMissingError(XdParserError):
    """Raised when a pattern fill names an asset id the archive does not hold."""

    def __init__(self, uid: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Resource '{uid}' is referenced but missing from the archive",
                         f"resources/{uid}", cause)
        self.uid = uid
