# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Gettext PO (Portable Object) and POT (PO Template) catalogs.

READING  --------
Read an existing catalog; the header entry is kept apart from the messages:

.. code-block:: python

    from po_catalog.pofile import Catalog
    catalog = Catalog.load("locale/messages.pot")
    catalog.header.cases[0]  # "Project-Id-Version: ..."

MERGING  --------
Merge freshly extracted messages, one reference per call site:

.. code-block:: python

    from po_catalog.pofile import CatalogEntry
    extracted = [
        CatalogEntry(text="Hello", references=("src/Main.kt:12",)),
        CatalogEntry(text="Hello", references=("src/View.kt:3",)),
    ]
    catalog = catalog.update(extracted)  # or Catalog.from_unmerged(extracted)

Existing translations are never touched; references into re-extracted files
are replaced and new messages are appended at the end.

WRITING  --------

.. code-block:: python

    catalog.save("locale/messages.pot")

"""

from __future__ import annotations

from .catalog import Catalog, group_by_text
from .entry import DEFAULT_HEADER, CatalogEntry
from .parser import parse, unescape
from .references import (
    compare_references,
    reference_key,
    reference_line,
    reference_path,
    sort_references,
)
from .writer import dump, dumps, escape, format_entry

__all__ = [
    "Catalog",
    "CatalogEntry",
    "DEFAULT_HEADER",
    "compare_references",
    "dump",
    "dumps",
    "escape",
    "format_entry",
    "group_by_text",
    "parse",
    "reference_key",
    "reference_line",
    "reference_path",
    "sort_references",
    "unescape",
]
