# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Pytest fixtures."""

import json

import pytest

from po_catalog.pofile import CatalogEntry

GERMAN_HEADER = CatalogEntry(
    text="",
    cases=(
        "Project-Id-Version: demo 1.0\n"
        "Language: de\n"
        "MIME-Version: 1.0\n"
        "Content-Type: text/plain; charset=UTF-8\n"
        "Content-Transfer-Encoding: 8bit\n"
        "Plural-Forms: nplurals=2; plural=(n != 1);\n",
    ),
)


@pytest.fixture
def german_header():
    """Header of a German translation catalog."""
    return GERMAN_HEADER


@pytest.fixture
def po_document():
    """A German catalog in the layout the writer produces."""
    return (
        "# German translations for demo.\n"
        "#\n"
        'msgid ""\n'
        'msgstr "Project-Id-Version: demo 1.0\\nLanguage: de\\n"\n'
        "\n"
        "# Translator note\n"
        "#. Shown on the start page\n"
        "#: src/Main.kt:12\n"
        "#: src/View.kt:3\n"
        "#, fuzzy\n"
        '#| msgid "Hi"\n'
        'msgctxt "greeting"\n'
        'msgid "Hello"\n'
        'msgstr "Hallo"\n'
        "\n"
        "#: src/Main.kt:20\n"
        'msgid "One file"\n'
        'msgid_plural "{n} files"\n'
        'msgstr[0] "Eine Datei"\n'
        'msgstr[1] "{n} Dateien"\n'
        "\n"
        "#: src/Main.kt:31\n"
        'msgid "Say \\"cheese\\"\\nplease"\n'
        'msgstr ""\n'
    )


@pytest.fixture
def extracted_records():
    """Call-site records as reported by the extractor."""
    return [
        {"keyword": "tr", "args": ["Hello"], "reference": "src/Main.kt:12"},
        {"keyword": "tr", "args": ["Hello"], "reference": "src/View.kt:3"},
        {
            "keyword": "trn",
            "args": ["One file", "{n} files", "n"],
            "reference": "src/Main.kt:20",
        },
        {"keyword": "unknown", "args": ["Nope"], "reference": "src/Main.kt:30"},
    ]


@pytest.fixture
def messages_file(tmp_path, extracted_records):
    """Write the extracted records to a JSON file."""
    path = tmp_path / "build" / "messages.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(extracted_records), encoding="utf-8")
    return path
