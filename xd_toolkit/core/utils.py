from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free; they can be used across all layers of the
toolkit.
"""

import re

__all__ = ["safe_filename", "guess_extension"]

_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", ".png"),
    (b"\xff\xd8\xff", ".jpg"),
    (b"GIF87a", ".gif"),
    (b"GIF89a", ".gif"),
)


def safe_filename(name: str) -> str:
    """Replace path separators and other unsafe characters in *name*."""
    cleaned = re.sub(r"[^\w.-]", "_", name).strip(".")
    return cleaned or "_"


def guess_extension(data: bytes) -> str:
    """Guess an image file extension from the leading bytes of *data*."""
    for signature, extension in _SIGNATURES:
        if data.startswith(signature):
            return extension
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return ".webp"
    return ".bin"
