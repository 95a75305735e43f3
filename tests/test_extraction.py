# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for turning extractor records into entries."""

import json

import pytest

from po_catalog.catalog_utilities import entries_from_records, entry_from_record
from po_catalog.config import PO_CATALOG_DEFAULT_KEYWORDS, parse_keywords
from po_catalog.pofile import CatalogEntry
from po_catalog.utils import load_extracted_messages


@pytest.fixture
def keywords():
    """The default keywords."""
    return parse_keywords(PO_CATALOG_DEFAULT_KEYWORDS)


def test_keyword_record(keywords):
    """Test that arguments are picked by keyword position."""
    entry = entry_from_record(
        {
            "keyword": "trnc",
            "args": ["files", "One file", "{n} files", "n"],
            "reference": "src/Main.kt:20",
            "comments": ["Shown in the toolbar"],
        },
        keywords,
    )

    assert entry == CatalogEntry(
        extracted_comments=("Shown in the toolbar",),
        references=("src/Main.kt:20",),
        context="files",
        text="One file",
        plural="{n} files",
    )


def test_resolved_record(keywords):
    """Test records that already carry the message."""
    entry = entry_from_record(
        {"msgid": "Hello", "msgctxt": "greeting", "reference": "a.kt:1"}, keywords
    )

    assert entry.text == "Hello"
    assert entry.context == "greeting"
    assert entry.plural is None
    assert entry.references == ("a.kt:1",)
    assert entry.cases == ()


@pytest.mark.parametrize(
    "record",
    [
        {"keyword": "unknown", "args": ["Nope"], "reference": "a.kt:1"},
        {"keyword": "trn", "args": ["One file"], "reference": "a.kt:1"},
        {"keyword": "trc", "args": ["ctx"], "reference": "a.kt:1"},
        {"keyword": "tr", "args": [42], "reference": "a.kt:1"},
        {"keyword": "tr", "args": [""], "reference": "a.kt:1"},
        {"msgid": "", "reference": "a.kt:1"},
        {"reference": "a.kt:1"},
        "not a record",
    ],
)
def test_unusable_records(keywords, record):
    """Test that unusable records give no entry."""
    assert entry_from_record(record, keywords) is None


def test_entries_from_records(keywords, extracted_records):
    """Test that skipped records are reported separately."""
    entries, skipped = entries_from_records(extracted_records, keywords)

    assert [entry.text for entry in entries] == ["Hello", "Hello", "One file"]
    assert skipped == [extracted_records[3]]


def test_load_extracted_messages(keywords, messages_file):
    """Test reading records from a JSON file and echoing skipped ones."""
    echoed = []

    entries = load_extracted_messages(
        messages_file, keywords, echo=lambda message, **kwargs: echoed.append(message)
    )

    assert len(entries) == 3
    assert len(echoed) == 1
    assert "unknown" in echoed[0]


def test_load_extracted_messages_requires_a_list(keywords, tmp_path):
    """Test that a JSON document that is not a list is rejected."""
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"msgid": "Hello"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_extracted_messages(path, keywords)
