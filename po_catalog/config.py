# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Configuration of po-catalog."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

PO_CATALOG_DEFAULT_KEYWORDS = [
    "tr",
    "trn:1,2",
    "trc:1c,2",
    "trnc:1c,2,3",
    "marktr",
]
"""Translation functions in xgettext ``--keyword`` syntax.

``trn:1,2`` means the first argument is the singular message and the second
one the plural; a ``c`` suffix marks the context argument.
"""

PO_CATALOG_ENCODING = "utf-8"
"""Encoding of catalogs and extracted message files."""

PO_CATALOG_REPORT_FILENAME = "validation-report.json"
"""Name of the report written by ``po-catalog validate``."""

PO_CATALOG_TEMPLATE_ENVVAR = "PO_CATALOG_TEMPLATE"
"""Environment variable holding the default catalog template path."""

PO_CATALOG_KEYWORDS_ENVVAR = "PO_CATALOG_KEYWORDS"
"""Environment variable holding whitespace separated keyword specs."""


@dataclass(frozen=True)
class Keyword:
    """A translation function and the positions (1-based) of its arguments."""

    name: str
    singular: int = 1
    plural: Optional[int] = None
    context: Optional[int] = None


def parse_keyword(spec: str) -> Keyword:
    """Parse a keyword spec like ``'trnc:1c,2,3'``.

    :param spec: Function name, optionally followed by ``:`` and positions
    :return: Keyword
    :raises ValueError: If the spec is malformed
    """
    name, sep, positions = spec.strip().partition(":")
    if not name:
        raise ValueError(f"Invalid keyword spec {spec!r}: missing function name")
    if not sep:
        return Keyword(name=name)

    context = None
    arguments = []
    for position in positions.split(","):
        position = position.strip()
        is_context = position.endswith("c")
        number = position[:-1] if is_context else position
        if not number.isdigit() or int(number) < 1:
            raise ValueError(f"Invalid keyword spec {spec!r}: bad position {position!r}")
        if is_context:
            if context is not None:
                raise ValueError(f"Invalid keyword spec {spec!r}: two contexts")
            context = int(number)
        else:
            arguments.append(int(number))

    if not arguments or len(arguments) > 2:
        raise ValueError(
            f"Invalid keyword spec {spec!r}: expected one or two message positions"
        )

    return Keyword(
        name=name,
        singular=arguments[0],
        plural=arguments[1] if len(arguments) == 2 else None,
        context=context,
    )


def parse_keywords(specs: Iterable[str]) -> dict[str, Keyword]:
    """Parse keyword specs into a mapping of function name to keyword.

    A later spec for the same function replaces an earlier one.
    """
    keywords = {}
    for spec in specs:
        keyword = parse_keyword(spec)
        keywords[keyword.name] = keyword
    return keywords
