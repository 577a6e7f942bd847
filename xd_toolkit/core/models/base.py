from __future__ import annotations

"""Common base for the XD document schema.

Every schema class maps JSON keys to attributes through an explicit
``Field(alias=...)`` declaration. Keys are matched exactly, unknown keys are
ignored and absent keys leave the attribute at ``None``.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["XdModel"]


class XdModel(BaseModel):
    """Frozen, lenient base model for decoded XD documents."""

    model_config = ConfigDict(extra="ignore", frozen=True)
