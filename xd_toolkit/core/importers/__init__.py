from __future__ import annotations

"""Importers turning design files into parsed containers.

Key components:
- XdPackageImporter: Validates and opens ``.xd`` containers
"""

from .xd_importer import XdPackageImporter

__all__ = ["XdPackageImporter"]
