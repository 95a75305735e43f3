# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Conversion helpers between catalogs and polib."""

from __future__ import annotations

from pathlib import Path

import polib
from polib import POEntry, POFile

from ..config import PO_CATALOG_ENCODING
from ..pofile import Catalog, CatalogEntry, reference_line, reference_path


def header_metadata(header: CatalogEntry) -> dict[str, str]:
    """Read the ``Key: value`` lines of a header entry.

    Lines without a colon are skipped.

    :param header: Catalog header
    :return: Dictionary like {"Content-Type": "text/plain; charset=UTF-8"}
    """
    metadata: dict[str, str] = {}
    if not header.cases:
        return metadata

    for line in header.cases[0].splitlines():
        key, sep, value = line.strip('"').partition(":")
        if sep and key.strip():
            metadata[key.strip()] = value.strip()
    return metadata


def _occurrence(reference: str) -> tuple[str, str]:
    line = reference_line(reference)
    return reference_path(reference), str(line) if line else ""


def _flags(entry: CatalogEntry) -> list[str]:
    if not entry.flags:
        return []
    return [flag.strip() for flag in entry.flags.split(",") if flag.strip()]


def entry_to_poentry(entry: CatalogEntry) -> POEntry:
    """Convert one catalog entry to a polib entry."""
    kwargs = {
        "msgid": entry.text,
        "msgctxt": entry.context,
        "tcomment": "\n".join(entry.comments),
        "comment": "\n".join(entry.extracted_comments),
        "occurrences": [_occurrence(ref) for ref in entry.references],
        "flags": _flags(entry),
    }

    if entry.plural is not None:
        kwargs["msgid_plural"] = entry.plural
        kwargs["msgstr_plural"] = dict(enumerate(entry.cases or ("", "")))
    else:
        kwargs["msgstr"] = entry.cases[0] if entry.cases else ""

    return POEntry(**kwargs)


def catalog_to_pofile(catalog: Catalog) -> POFile:
    """Convert a catalog to a polib file, header lines becoming metadata.

    :param catalog: Catalog to convert
    :return: polib POFile with one entry per message, in catalog order
    """
    po_file = polib.POFile(encoding=PO_CATALOG_ENCODING)
    po_file.metadata = header_metadata(catalog.header)
    if catalog.header.is_fuzzy:
        po_file.metadata_is_fuzzy = True

    for entry in catalog:
        po_file.append(entry_to_poentry(entry))

    return po_file


def compile_catalog(catalog: Catalog, mo_path: Path) -> int:
    """Write the binary ``.mo`` file of a catalog.

    Fuzzy and untranslated messages are left out.

    :param catalog: Catalog to compile
    :param mo_path: Output path, parent directories are created
    :return: Number of messages written
    :raises OSError: If the file can't be written
    """
    po_file = catalog_to_pofile(catalog)
    mo_path.parent.mkdir(parents=True, exist_ok=True)
    po_file.save_as_mofile(str(mo_path))
    return len(po_file.translated_entries())
