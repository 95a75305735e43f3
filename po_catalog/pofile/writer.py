# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""PO/POT writer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .entry import CatalogEntry


def escape(value: str) -> str:
    """Quote a string for a PO field; the inverse of ``unescape``."""
    return '"' + value.replace('"', '\\"').replace("\n", "\\n") + '"'


def _translation_lines(entry: CatalogEntry) -> list[str]:
    if entry.plural is None and len(entry.cases) <= 1:
        value = entry.cases[0] if entry.cases else ""
        return [f"msgstr {escape(value)}"]

    cases = entry.cases or ("", "")
    return [f"msgstr[{index}] {escape(case)}" for index, case in enumerate(cases)]


def format_entry(entry: CatalogEntry) -> str:
    """Render an entry as PO text, one line per field, without a trailing newline.

    :param entry: Entry to render (the header included)
    :return: Lines joined with ``\\n``
    """
    lines = [f"# {comment}" if comment else "#" for comment in entry.comments]
    lines += [f"#. {comment}" for comment in entry.extracted_comments]
    lines += [f"#: {reference}" for reference in entry.references]
    if entry.flags is not None:
        lines.append(f"#, {entry.flags}")
    lines += [f"#| {previous}" for previous in entry.previous]
    if entry.context is not None:
        lines.append(f"msgctxt {escape(entry.context)}")
    lines.append(f"msgid {escape(entry.text)}")
    if entry.plural is not None:
        lines.append(f"msgid_plural {escape(entry.plural)}")
    lines += _translation_lines(entry)
    return "\n".join(lines)


def dump(header: CatalogEntry, entries: Iterable[CatalogEntry], fp: TextIO) -> None:
    """Write the header and every entry to a text stream."""
    fp.write(format_entry(header))
    fp.write("\n")
    for entry in entries:
        fp.write("\n")
        fp.write(format_entry(entry))
        fp.write("\n")


def dumps(header: CatalogEntry, entries: Iterable[CatalogEntry]) -> str:
    """Render a whole document.

    :param header: Header entry, always written first
    :param entries: Messages in output order
    :return: PO/POT document text
    """
    parts = [format_entry(header) + "\n"]
    parts += ["\n" + format_entry(entry) + "\n" for entry in entries]
    return "".join(parts)
