# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Catalog maintenance utils."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .catalog_utilities.extraction import entries_from_records
from .catalog_utilities.io import read_json_file
from .config import Keyword
from .pofile import DEFAULT_HEADER, Catalog, CatalogEntry

Echo = Optional[Callable[[str], None]]


def _echo(message: str, echo: Echo, **kwargs) -> None:
    """Call the provided echo callback if it exists."""
    if echo:
        echo(message, **kwargs)


def convert_to_list(_, __, value):
    """Turn Click's multiple=True tuple into a plain list."""
    if value is None:
        return []
    return list(value)


def split_keywords(_, __, value):
    """Split whitespace separated keyword specs (as given via the envvar)."""
    if value is None:
        return []
    return [spec for item in value for spec in item.split()]


def ensure_parent_directory(_, __, value):
    """Make sure the parent directory exists for a Click Path option."""
    if value:
        value.parent.mkdir(parents=True, exist_ok=True)
    return value


@dataclass
class MergeResult:
    """Outcome of merging extracted messages into a catalog file."""

    catalog: Catalog
    created: bool
    added: list[str]


def load_extracted_messages(
    messages_path: Path,
    keywords: dict[str, Keyword],
    *,
    echo: Echo = None,
) -> list[CatalogEntry]:
    """Read the call-site records written by the extractor.

    :param messages_path: JSON file holding a list of records
    :param keywords: Known translation functions by name
    :return: Entries in record order, unusable records left out
    :raises OSError: If the file can't be read
    :raises ValueError: If the file is not a JSON list
    """
    records = read_json_file(messages_path)
    if not isinstance(records, list):
        raise ValueError(f"{messages_path} does not contain a list of messages")

    entries, skipped = entries_from_records(records, keywords)
    for record in skipped:
        _echo(f"  Skipping unusable message record: {record!r}", echo, fg="yellow")

    return entries


def merge_catalog_file(
    template_path: Path,
    messages: list[CatalogEntry],
    *,
    header: CatalogEntry = DEFAULT_HEADER,
    echo: Echo = None,
) -> MergeResult:
    """Merge extracted messages into a catalog file and save it.

    If the file doesn't exist yet it is created from the messages alone,
    with ``header`` as its header.

    :param template_path: Catalog (``.pot`` or ``.po``) to update
    :param messages: Freshly extracted messages
    :param header: Header for a newly created catalog
    :return: MergeResult with the saved catalog and the added message ids
    :raises OSError: If the file can't be read or written
    """
    if template_path.exists():
        previous = Catalog.load(template_path)
        catalog = previous.update(messages)
        known = {entry.text for entry in previous}
        added = [entry.text for entry in catalog if entry.text not in known]
        created = False
        _echo(f"  Read {len(previous)} message(s) from {template_path}", echo, fg="cyan")
    else:
        catalog = Catalog.from_unmerged(messages, header)
        added = [entry.text for entry in catalog]
        created = True
        _echo(f"  Creating {template_path}", echo, fg="cyan")

    catalog.save(template_path)
    _echo(f"Wrote {template_path}", echo, fg="green")

    return MergeResult(catalog=catalog, created=created, added=added)
