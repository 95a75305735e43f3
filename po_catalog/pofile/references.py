# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Ordering of ``path:line`` source references."""

from __future__ import annotations

import re
from collections.abc import Iterable

_LINE_NUMBER = re.compile(r"[+-]?\d+")
_LINE_MIN = -(2**31)
_LINE_MAX = 2**31 - 1


def reference_path(reference: str) -> str:
    """Return the path part of a reference (everything before the first ``:``).

    :param reference: Reference like ``'src/Main.kt:12'``
    :return: Path like ``'src/Main.kt'``, or the whole reference without ``:``
    """
    return reference.partition(":")[0]


def reference_line(reference: str) -> int:
    """Return the line number of a reference, ``0`` if it can't be parsed.

    A reference without ``:`` is parsed as a whole. Numbers outside the
    signed 32-bit range count as unparsable.
    """
    path, sep, line = reference.partition(":")
    if not sep:
        line = path
    if _LINE_NUMBER.fullmatch(line):
        number = int(line)
        if _LINE_MIN <= number <= _LINE_MAX:
            return number
    return 0


def reference_key(reference: str) -> tuple[str, int]:
    """Sort key: path by code point, then line numerically."""
    return reference_path(reference), reference_line(reference)


def compare_references(first: str, second: str) -> int:
    """Compare two references, returning a negative, zero or positive number."""
    first_key = reference_key(first)
    second_key = reference_key(second)
    return (first_key > second_key) - (first_key < second_key)


def sort_references(references: Iterable[str]) -> tuple[str, ...]:
    """Sort references; equal references keep their relative order."""
    return tuple(sorted(references, key=reference_key))
