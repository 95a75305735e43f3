# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Extraction intake, validation, and compilation utilities.

EXTRACTION  --------
Turn the call-site records of an external extractor into catalog entries:

.. code-block:: python

    from po_catalog.config import PO_CATALOG_DEFAULT_KEYWORDS, parse_keywords
    from po_catalog.catalog_utilities import entries_from_records

    keywords = parse_keywords(PO_CATALOG_DEFAULT_KEYWORDS)
    entries, skipped = entries_from_records(records, keywords)

HEADER  ------
Create the header of a new template from package metadata:

.. code-block:: python

    from po_catalog.catalog_utilities import render_header
    header = render_header("my-app", "1.2.0", "i18n@example.org")

VALIDATION  ------
Check catalogs for problems:

.. code-block:: python

    from po_catalog.catalog_utilities import validate_catalogs
    summary = validate_catalogs([Path("locale/de/LC_MESSAGES/messages.po")])

The validation report identifies:
- **Untranslated**: messages whose translations are all empty
- **Fuzzy**: translations marked with ``#, fuzzy`` that need review

COMPILATION  ------
Write a binary ``.mo`` file through polib:

.. code-block:: python

    from po_catalog.catalog_utilities import compile_catalog
    compile_catalog(catalog, Path("locale/de/LC_MESSAGES/messages.mo"))

"""

from __future__ import annotations

from .convert import catalog_to_pofile, compile_catalog, header_metadata
from .extraction import entries_from_records, entry_from_record
from .header import render_header
from .io import read_json_file, write_json_file
from .validate import validate_catalog, validate_catalogs, write_validation_report

__all__ = [
    "catalog_to_pofile",
    "compile_catalog",
    "entries_from_records",
    "entry_from_record",
    "header_metadata",
    "read_json_file",
    "render_header",
    "validate_catalog",
    "validate_catalogs",
    "write_json_file",
    "write_validation_report",
]
