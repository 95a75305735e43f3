# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Header of newly created catalogs."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from jinja2 import BaseLoader, Environment

from ..pofile import DEFAULT_HEADER, CatalogEntry

HEADER_TEMPLATE = """\
Project-Id-Version: {{ package_name }} {{ package_version }}
Report-Msgid-Bugs-To: {{ bugs_address }}
PO-Revision-Date: YEAR-MO-DA HO:MI+ZONE
Last-Translator: FULL NAME <EMAIL@ADDRESS>
Language-Team: LANGUAGE <LL@li.org>
Language: {{ language }}
MIME-Version: 1.0
Content-Type: text/plain; charset=UTF-8
Content-Transfer-Encoding: 8bit
Plural-Forms: nplurals=INTEGER; plural=EXPRESSION;
"""


def render_header(
    package_name: str,
    package_version: Optional[str] = None,
    bugs_address: Optional[str] = None,
    language: Optional[str] = None,
) -> CatalogEntry:
    """Create a header entry filled in with package metadata.

    Everything the metadata doesn't cover is left as in ``DEFAULT_HEADER``.

    :param package_name: Name like ``'my-app'``
    :param package_version: Version like ``'1.2.0'``
    :param bugs_address: Address for reporting problems with source messages
    :param language: Language code like ``'de'`` for a translation catalog
    :return: Header entry (empty ``text``)
    """
    environment = Environment(loader=BaseLoader(), keep_trailing_newline=True)
    template = environment.from_string(HEADER_TEMPLATE)
    metadata = template.render(
        package_name=package_name,
        package_version=package_version or "VERSION",
        bugs_address=bugs_address or "",
        language=language or "",
    )

    comments = (
        f"Translations template for {package_name}.",
        *DEFAULT_HEADER.comments[1:],
    )
    return replace(DEFAULT_HEADER, comments=comments, cases=(metadata,))
