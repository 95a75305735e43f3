# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Keep gettext catalogs in sync with extracted messages.

Each extraction pass is merged into the existing catalog: new messages are
appended, source references are refreshed and translations stay untouched.
See :mod:`po_catalog.pofile` for the catalog API and ``po-catalog --help``
for the command line.
"""

from .pofile import DEFAULT_HEADER, Catalog, CatalogEntry

__version__ = "0.1.0"

__all__ = (
    "__version__",
    "Catalog",
    "CatalogEntry",
    "DEFAULT_HEADER",
)
