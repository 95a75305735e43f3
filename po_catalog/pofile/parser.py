# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""PO/POT parser.

The parser is deliberately lenient: hand-edited catalogs with lines it does
not understand are read as far as possible instead of being rejected.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from .entry import DEFAULT_HEADER, CatalogEntry

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def unescape(value: str) -> str:
    """Turn a quoted PO string into its text.

    :param value: Raw field value like ``'"Say \\"hi\\"\\n"'``
    :return: Unquoted text with ``\\"`` and ``\\n`` resolved
    """
    trimmed = value.strip()
    if trimmed.startswith('"'):
        trimmed = trimmed[1:-1]
    return trimmed.replace('\\"', '"').replace("\\n", "\n")


def _substring_after(value: str, delimiter: str) -> str:
    """Return the part after ``delimiter``, or ``value`` if it is missing."""
    _, sep, rest = value.partition(delimiter)
    return rest if sep else value


@dataclass
class _PendingEntry:
    """Fields of the entry currently being read."""

    comments: list[str] = field(default_factory=list)
    extracted_comments: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    flags: Optional[str] = None
    previous: list[str] = field(default_factory=list)
    context: Optional[str] = None
    text: Optional[str] = None
    plural: Optional[str] = None
    cases: list[str] = field(default_factory=list)

    def to_entry(self) -> Optional[CatalogEntry]:
        """Build the entry, or None if no ``msgid`` was read."""
        if self.text is None:
            return None
        return CatalogEntry(
            comments=tuple(self.comments),
            extracted_comments=tuple(self.extracted_comments),
            references=tuple(self.references),
            flags=self.flags,
            previous=tuple(self.previous),
            context=self.context,
            text=self.text,
            plural=self.plural,
            cases=tuple(self.cases),
        )

    def feed(self, line: str) -> None:
        """Apply one non-blank line."""
        if line == "#":
            self.comments.append("")
        elif line.startswith("# "):
            self.comments.append(line[2:])
        elif line.startswith("#. "):
            self.extracted_comments.append(line[3:])
        elif line.startswith("#: "):
            self.references.append(line[3:])
        elif line.startswith("#, "):
            self.flags = line[3:]
        elif line.startswith("#| "):
            self.previous.append(line[3:])
        elif line.startswith("msgctxt "):
            self.context = unescape(line[len("msgctxt ") :])
        elif line.startswith("msgid "):
            self.text = unescape(line[len("msgid ") :])
        elif line.startswith("msgid_plural "):
            self.plural = unescape(line[len("msgid_plural ") :])
        elif line.startswith("msgstr "):
            self.cases.append(unescape(line[len("msgstr ") :]))
        elif line.startswith("msgstr["):
            remainder = _substring_after(line[len("msgstr[") :], "] ")
            self.cases.append(unescape(remainder))
        elif self.cases:
            # Continuation lines only ever extend the first translation.
            self.cases[0] = self.cases[0] + '"\n"' + line.strip().strip('"')


def parse_lines(lines: Iterable[str]) -> list[CatalogEntry]:
    """Read every entry, the header included, in document order."""
    entries: list[CatalogEntry] = []
    pending = _PendingEntry()

    for line in lines:
        if not line.strip():
            entry = pending.to_entry()
            if entry is not None:
                entries.append(entry)
            pending = _PendingEntry()
        else:
            pending.feed(line)

    entry = pending.to_entry()
    if entry is not None:
        entries.append(entry)

    return entries


def parse(source: Union[str, bytes]) -> tuple[list[CatalogEntry], CatalogEntry]:
    """Parse a PO/POT document.

    :param source: Document text, or its UTF-8 encoded bytes (invalid bytes
        are read as U+FFFD)
    :return: Pair of (messages in file order, header entry)
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8", errors="replace")

    all_entries = parse_lines(_LINE_BREAK.split(source))

    header = next((entry for entry in all_entries if entry.is_header), DEFAULT_HEADER)
    messages = [entry for entry in all_entries if not entry.is_header]

    return messages, header
