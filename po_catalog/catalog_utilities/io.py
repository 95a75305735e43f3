# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""JSON file helpers."""

from __future__ import annotations

from json import dump, load
from pathlib import Path
from typing import Any

from ..config import PO_CATALOG_ENCODING


def read_json_file(path: Path) -> Any:
    """Load a JSON document.

    :raises OSError: If the file can't be read
    :raises ValueError: If the content is not valid JSON
    """
    with path.open("r", encoding=PO_CATALOG_ENCODING) as fp:
        return load(fp)


def write_json_file(path: Path, data: Any) -> None:
    """Write data as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=PO_CATALOG_ENCODING) as fp:
        dump(data, fp, indent=2, ensure_ascii=False)
