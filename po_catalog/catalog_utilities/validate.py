# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Validation helpers for catalogs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import PO_CATALOG_REPORT_FILENAME
from ..pofile import Catalog
from .convert import header_metadata
from .io import write_json_file


@dataclass
class Issues:
    """Translation issues found in a catalog."""

    untranslated: list[str] = field(default_factory=list)
    fuzzy: list[str] = field(default_factory=list)


@dataclass
class Counts:
    """Counts of translation issues."""

    untranslated: int = 0
    fuzzyTranslations: int = 0

    @classmethod
    def from_issues(cls, issues: Issues) -> Counts:
        """Create Counts from Issues object."""
        return cls(
            untranslated=len(issues.untranslated),
            fuzzyTranslations=len(issues.fuzzy),
        )

    @property
    def total(self) -> int:
        """Calculate total number of issues."""
        return self.untranslated + self.fuzzyTranslations


@dataclass
class ValidationReport:
    """Validation report for a single catalog."""

    filename: Path
    language: Optional[str]
    messages: int
    issues: Issues
    counts: Counts


@dataclass
class LanguageBreakdown:
    """Breakdown of issues by language."""

    catalogs: int = 0
    total_issues: int = 0
    untranslated_strings: int = 0
    fuzzy_translations: int = 0
    is_complete: bool = True


@dataclass
class ValidationSummary:
    """Summary of validation results across all catalogs."""

    total_catalogs: int = 0
    total_messages: int = 0
    total_issues: int = 0
    untranslated_strings: int = 0
    fuzzy_translations: int = 0
    language_breakdown: dict[str, LanguageBreakdown] = field(default_factory=dict)
    reports: list[ValidationReport] = field(default_factory=list)


def validate_catalog(catalog: Catalog, path: Path) -> ValidationReport:
    """Check one catalog for problems.

    :param catalog: The catalog to check
    :param path: Path to the file being checked
    :return: ValidationReport with all issues found
    """
    issues = Issues()

    for entry in catalog:
        if entry.is_fuzzy:
            issues.fuzzy.append(entry.text)
        elif not entry.is_translated:
            issues.untranslated.append(entry.text)

    language = header_metadata(catalog.header).get("Language") or None

    return ValidationReport(
        filename=path,
        language=language,
        messages=len(catalog),
        issues=issues,
        counts=Counts.from_issues(issues),
    )


def validate_catalogs(paths: list[Path]) -> ValidationSummary:
    """Validate catalog files.

    :param paths: Catalog files like [Path('locale/de/LC_MESSAGES/messages.po')]
    :return: ValidationSummary with all issues found
    :raises OSError: If a catalog can't be read
    """
    reports = [validate_catalog(Catalog.load(path), path) for path in paths]
    return calculate_validation_summary(reports)


def calculate_validation_summary(reports: list[ValidationReport]) -> ValidationSummary:
    """Create a summary of all validation issues.

    Catalogs without a ``Language`` header (templates) are not part of the
    language breakdown.
    """
    language_breakdown: dict[str, LanguageBreakdown] = {}

    for report in reports:
        if report.language is None:
            continue
        counts = report.counts
        breakdown = language_breakdown.setdefault(report.language, LanguageBreakdown())
        breakdown.catalogs += 1
        breakdown.total_issues += counts.total
        breakdown.untranslated_strings += counts.untranslated
        breakdown.fuzzy_translations += counts.fuzzyTranslations
        if counts.total > 0:
            breakdown.is_complete = False

    return ValidationSummary(
        total_catalogs=len(reports),
        total_messages=sum(r.messages for r in reports),
        total_issues=sum(r.counts.total for r in reports),
        untranslated_strings=sum(r.counts.untranslated for r in reports),
        fuzzy_translations=sum(r.counts.fuzzyTranslations for r in reports),
        language_breakdown=language_breakdown,
        reports=list(reports),
    )


def _language_breakdown_to_dict(breakdown: LanguageBreakdown) -> dict:
    """Convert LanguageBreakdown to dictionary for JSON."""
    return {
        "catalogs": breakdown.catalogs,
        "totalIssues": breakdown.total_issues,
        "untranslatedStrings": breakdown.untranslated_strings,
        "fuzzyTranslations": breakdown.fuzzy_translations,
        "isComplete": breakdown.is_complete,
    }


def _validation_report_to_dict(report: ValidationReport) -> dict:
    """Convert ValidationReport to dictionary for JSON."""
    return {
        "file": str(report.filename),
        "language": report.language,
        "messages": report.messages,
        "issues": {
            "untranslated": report.issues.untranslated,
            "fuzzyTranslations": report.issues.fuzzy,
        },
        "counts": {
            "untranslated": report.counts.untranslated,
            "fuzzyTranslations": report.counts.fuzzyTranslations,
        },
    }


def write_validation_report(
    validation_summary: ValidationSummary, output_dir: Path
) -> Path:
    """Write validation report to JSON file.

    :param validation_summary: Output from validate_catalogs()
    :param output_dir: Where to save the validation report
    :return: Path of the written report
    """
    report_dict = {
        "summary": {
            "totalCatalogs": validation_summary.total_catalogs,
            "totalMessages": validation_summary.total_messages,
            "totalIssues": validation_summary.total_issues,
            "untranslatedStrings": validation_summary.untranslated_strings,
            "fuzzyTranslations": validation_summary.fuzzy_translations,
        },
        "languageBreakdown": {
            language: _language_breakdown_to_dict(breakdown)
            for language, breakdown in validation_summary.language_breakdown.items()
        },
        "reports": [_validation_report_to_dict(r) for r in validation_summary.reports],
    }

    report_path = output_dir / PO_CATALOG_REPORT_FILENAME
    write_json_file(report_path, report_dict)
    return report_path
