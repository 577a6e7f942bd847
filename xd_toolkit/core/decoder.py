from __future__ import annotations

"""Decoding of JSON document text into the typed XD schema.

All decoding goes through :func:`decode_document`, which turns pydantic
validation failures (including malformed JSON) into :class:`XdFormatError`.
"""

import logging
from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from xd_toolkit.core.exceptions import XdFormatError
from xd_toolkit.core.models import XdArtboardDocument, XdManifest, XdModel, XdResources

logger = logging.getLogger(__name__)

__all__ = [
    "decode_document",
    "decode_manifest",
    "decode_artboard",
    "decode_resources",
]

M = TypeVar("M", bound=XdModel)


def decode_document(text: str, model: Type[M], source: Optional[str] = None) -> M:
    """Decode *text* as an instance of *model*.

    Args:
        text: JSON document text
        model: Schema class to decode into
        source: Archive entry the text came from, used in error messages

    Returns:
        Fully populated, frozen model instance

    Raises:
        XdFormatError: If the text is not JSON or does not fit the schema
    """
    try:
        document = model.model_validate_json(text)
    except ValidationError as e:
        where = source or model.__name__
        raise XdFormatError(
            f"Cannot decode {where} as {model.__name__}: {e.error_count()} error(s)",
            source, e,
        ) from e
    logger.debug("Decoded %s as %s", source or "<text>", model.__name__)
    return document


def decode_manifest(text: str, source: Optional[str] = "manifest") -> XdManifest:
    return decode_document(text, XdManifest, source)


def decode_artboard(text: str, source: Optional[str] = None) -> XdArtboardDocument:
    return decode_document(text, XdArtboardDocument, source)


def decode_resources(text: str, source: Optional[str] = None) -> XdResources:
    return decode_document(text, XdResources, source)
