# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Turn extractor call-site records into catalog entries.

Scanning sources is done by an external extractor. It reports one record
per call site, either with the message already resolved::

    {"msgid": "One file", "msgid_plural": "{n} files", "reference": "src/Main.kt:12"}

or with the raw call, resolved here through the configured keywords::

    {"keyword": "trn", "args": ["One file", "{n} files", "n"], "reference": "src/Main.kt:12"}

``comments`` (a list of strings) becomes the extracted comments.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from ..config import Keyword
from ..pofile import CatalogEntry


def _argument(args: list, position: Optional[int]) -> Optional[str]:
    if position is None or position > len(args):
        return None
    value = args[position - 1]
    return value if isinstance(value, str) else None


def _message_fields(
    record: dict[str, Any], keywords: dict[str, Keyword]
) -> Optional[tuple[Optional[str], str, Optional[str]]]:
    """Return (context, text, plural) of a record, or None if unresolvable."""
    if "keyword" not in record:
        text = record.get("msgid")
        if not isinstance(text, str):
            return None
        return record.get("msgctxt"), text, record.get("msgid_plural")

    keyword = keywords.get(record["keyword"])
    if keyword is None:
        return None

    args = record.get("args") or []
    text = _argument(args, keyword.singular)
    plural = _argument(args, keyword.plural)
    context = _argument(args, keyword.context)
    if text is None:
        return None
    if keyword.plural is not None and plural is None:
        return None
    if keyword.context is not None and context is None:
        return None
    return context, text, plural


def entry_from_record(
    record: Any, keywords: dict[str, Keyword]
) -> Optional[CatalogEntry]:
    """Build the catalog entry of one call site.

    :param record: Decoded JSON object reported by the extractor
    :param keywords: Known translation functions by name
    :return: Entry with one reference, or None if the record is unusable
        (unknown keyword, missing arguments, empty message)
    """
    if not isinstance(record, dict):
        return None

    fields = _message_fields(record, keywords)
    if fields is None:
        return None
    context, text, plural = fields
    # The empty msgid is reserved for the catalog header.
    if not text:
        return None

    reference = record.get("reference")
    comments = record.get("comments") or []
    return CatalogEntry(
        extracted_comments=tuple(str(comment) for comment in comments),
        references=(reference,) if isinstance(reference, str) else (),
        context=context,
        text=text,
        plural=plural,
    )


def entries_from_records(
    records: Iterable[Any], keywords: dict[str, Keyword]
) -> tuple[list[CatalogEntry], list[Any]]:
    """Convert every record, keeping track of the unusable ones.

    :return: Pair of (entries in record order, skipped records)
    """
    entries = []
    skipped = []
    for record in records:
        entry = entry_from_record(record, keywords)
        if entry is None:
            skipped.append(record)
        else:
            entries.append(entry)
    return entries, skipped
