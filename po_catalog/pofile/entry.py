# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Catalog entry value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_SEQUENCE_FIELDS = (
    "comments",
    "extracted_comments",
    "references",
    "previous",
    "cases",
)


@dataclass(frozen=True)
class CatalogEntry:
    """A single message of a PO/POT catalog and its metadata.

    An entry whose ``text`` is empty is the catalog header. Sequences are
    stored as tuples so that entries can be shared between catalogs; derive
    modified entries with :func:`dataclasses.replace`.
    """

    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    references: tuple[str, ...] = ()
    flags: Optional[str] = None
    previous: tuple[str, ...] = ()
    context: Optional[str] = None
    text: str = ""
    plural: Optional[str] = None
    cases: tuple[str, ...] = ()

    def __post_init__(self):
        """Freeze sequence fields passed in as lists."""
        for name in _SEQUENCE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def is_header(self) -> bool:
        """Whether this entry is the catalog header."""
        return self.text == ""

    @property
    def is_fuzzy(self) -> bool:
        """Whether the ``fuzzy`` flag is set."""
        if not self.flags:
            return False
        return "fuzzy" in (flag.strip() for flag in self.flags.split(","))

    @property
    def is_translated(self) -> bool:
        """Whether at least one translated form is non-empty."""
        return any(self.cases)


DEFAULT_HEADER = CatalogEntry(
    comments=(
        "SOME DESCRIPTIVE TITLE.",
        "Copyright (C) YEAR THE PACKAGE'S COPYRIGHT HOLDER",
        "This file is distributed under the same license as the PACKAGE package.",
        "FIRST AUTHOR <EMAIL@ADDRESS>, YEAR.",
        "",
    ),
    flags="fuzzy",
    text="",
    cases=(
        "Project-Id-Version: PACKAGE VERSION\n"
        "Report-Msgid-Bugs-To: \n"
        "\n"
        "PO-Revision-Date: YEAR-MO-DA HO:MI+ZONE\n"
        "Last-Translator: FULL NAME <EMAIL@ADDRESS>\n"
        "Language-Team: LANGUAGE <LL@li.org>\n"
        "Language: \n"
        "MIME-Version: 1.0\n"
        "Content-Type: text/plain; charset=UTF-8\n"
        "Content-Transfer-Encoding: 8bit\n"
        "Plural-Forms: nplurals=INTEGER; plural=EXPRESSION;\n",
    ),
)
