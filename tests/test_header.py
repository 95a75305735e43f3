# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for the header of new catalogs."""

from po_catalog.catalog_utilities import header_metadata, render_header
from po_catalog.pofile import DEFAULT_HEADER, Catalog


def test_render_header():
    """Test that package metadata is filled in."""
    header = render_header("my-app", "1.2.0", "i18n@example.org")

    assert header.is_header
    assert header.flags == "fuzzy"
    assert header.comments[0] == "Translations template for my-app."
    assert header.comments[1:] == DEFAULT_HEADER.comments[1:]
    assert header.cases[0].startswith(
        "Project-Id-Version: my-app 1.2.0\nReport-Msgid-Bugs-To: i18n@example.org\n"
    )
    assert header.cases[0].endswith("Plural-Forms: nplurals=INTEGER; plural=EXPRESSION;\n")


def test_render_header_placeholders():
    """Test that missing metadata keeps template placeholders."""
    metadata = header_metadata(render_header("my-app", language="de"))

    assert metadata["Project-Id-Version"] == "my-app VERSION"
    assert metadata["Report-Msgid-Bugs-To"] == ""
    assert metadata["Language"] == "de"
    assert metadata["Content-Type"] == "text/plain; charset=UTF-8"


def test_rendered_header_survives_round_trip():
    """Test that a catalog with a rendered header reads back unchanged."""
    catalog = Catalog((), render_header("my-app", "1.2.0"))

    assert Catalog.read(catalog.dumps()).header == catalog.header


def test_default_header_metadata():
    """Test reading the metadata of the default header."""
    metadata = header_metadata(DEFAULT_HEADER)

    assert metadata["Project-Id-Version"] == "PACKAGE VERSION"
    assert metadata["MIME-Version"] == "1.0"
    assert "" not in metadata
