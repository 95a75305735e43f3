# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""CLI for po-catalog."""

import sys
from pathlib import Path
from typing import Optional

import rich_click as click
from rich_click import Path as ClickPath
from rich_click import group, option, secho

from .catalog_utilities.convert import compile_catalog
from .catalog_utilities.header import render_header
from .catalog_utilities.validate import validate_catalogs, write_validation_report
from .config import (
    PO_CATALOG_DEFAULT_KEYWORDS,
    PO_CATALOG_KEYWORDS_ENVVAR,
    PO_CATALOG_TEMPLATE_ENVVAR,
    parse_keywords,
)
from .pofile import DEFAULT_HEADER, Catalog
from .utils import (
    convert_to_list,
    ensure_parent_directory,
    load_extracted_messages,
    merge_catalog_file,
    split_keywords,
)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.USE_MARKDOWN = False


@group()
def catalog():
    """Gettext catalog commands."""


@catalog.command("merge")
@option(
    "--template",
    "-t",
    required=True,
    envvar=PO_CATALOG_TEMPLATE_ENVVAR,
    type=ClickPath(dir_okay=False, file_okay=True, writable=True, path_type=Path),
    callback=ensure_parent_directory,
    help="Catalog to update (.pot or .po). Created if it doesn't exist.",
)
@option(
    "--messages",
    "-m",
    "messages_path",
    required=True,
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
    help="JSON file with the call-site records found by the extractor.",
)
@option(
    "--keyword",
    "-k",
    "keyword_specs",
    multiple=True,
    envvar=PO_CATALOG_KEYWORDS_ENVVAR,
    callback=split_keywords,
    help="Translation function like 'trn:1,2'. Can be specified multiple times.",
)
@option("--package-name", help="Package name for the header of a new catalog.")
@option("--package-version", help="Package version for the header of a new catalog.")
@option("--bugs-address", help="Report-Msgid-Bugs-To address of a new catalog.")
def merge(
    template: Path,
    messages_path: Path,
    keyword_specs: list[str],
    package_name: Optional[str],
    package_version: Optional[str],
    bugs_address: Optional[str],
):
    """Merge extracted messages into a catalog.

    Existing translations are kept, references are refreshed and new
    messages are appended at the end of the catalog.

    Examples:
        po-catalog merge -t locale/messages.pot -m build/messages.json
        po-catalog merge -t locale/messages.pot -m build/messages.json -k tr -k trn:1,2
    """
    try:
        keywords = parse_keywords(keyword_specs or PO_CATALOG_DEFAULT_KEYWORDS)
        messages = load_extracted_messages(messages_path, keywords, echo=secho)
        header = (
            render_header(package_name, package_version, bugs_address)
            if package_name
            else DEFAULT_HEADER
        )
        result = merge_catalog_file(template, messages, header=header, echo=secho)
    except (OSError, ValueError) as error:
        secho(f"Error: {error}", fg="red")
        sys.exit(1)

    action = "Created" if result.created else "Updated"
    secho(
        f"{action} {template}: {len(result.catalog)} message(s), "
        f"{len(result.added)} new.",
        fg="green",
    )


@catalog.command("validate")
@option(
    "--catalog",
    "-c",
    "catalog_paths",
    required=True,
    multiple=True,
    callback=convert_to_list,
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
    help="Catalogs to validate. Can be specified multiple times.",
)
@option(
    "--output-directory",
    "-o",
    type=ClickPath(
        exists=False, file_okay=False, dir_okay=True, writable=True, path_type=Path
    ),
    default=None,
    help="Directory for validation report. Default: ./i18n-reports",
)
def cmd_validate(catalog_paths: list[Path], output_directory: Optional[Path]):
    """Validate translation quality.

    Checks catalogs for untranslated and fuzzy messages and writes a JSON
    report (default: ./i18n-reports/validation-report.json).

    Examples:
        po-catalog validate -c locale/de/LC_MESSAGES/messages.po
        po-catalog validate -c de.po -c sv.po -o ./my-reports
    """
    output_dir = output_directory or Path.cwd() / "i18n-reports"

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        summary = validate_catalogs(catalog_paths)
        report_path = write_validation_report(summary, output_dir)
    except OSError as error:
        secho(f"Error: {error}", fg="red")
        sys.exit(1)

    secho(f"Validation report written: {report_path}", fg="green")
    secho(
        f"Summary: catalogs={summary.total_catalogs}, "
        f"messages={summary.total_messages}, "
        f"issues={summary.total_issues}",
    )


@catalog.command("compile")
@option(
    "--catalog",
    "-c",
    "catalog_path",
    required=True,
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
    help="Translated catalog (.po).",
)
@option(
    "--output",
    "-o",
    "mo_path",
    required=True,
    type=ClickPath(dir_okay=False, file_okay=True, writable=True, path_type=Path),
    callback=ensure_parent_directory,
    help="Binary catalog (.mo) to write.",
)
def cmd_compile(catalog_path: Path, mo_path: Path):
    """Compile a catalog into a binary .mo file.

    Fuzzy and untranslated messages are left out.

    Examples:
        po-catalog compile -c locale/de/LC_MESSAGES/messages.po -o locale/de/LC_MESSAGES/messages.mo
    """
    try:
        count = compile_catalog(Catalog.load(catalog_path), mo_path)
    except OSError as error:
        secho(f"Error: {error}", fg="red")
        sys.exit(1)

    secho(f"Compiled {count} message(s) into {mo_path}", fg="green")
