# -*- coding: utf-8 -*-
#
# This file is part of po-catalog.
# Copyright (C) 2025 po-catalog contributors.
#
# po-catalog is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Catalog read, write and merge."""

from __future__ import annotations

import codecs
from collections.abc import Iterable
from dataclasses import dataclass, replace
from io import BufferedIOBase, RawIOBase, TextIOBase
from pathlib import Path
from typing import IO, Optional, Union

from .entry import DEFAULT_HEADER, CatalogEntry
from .parser import parse
from .references import reference_path, sort_references
from .writer import dump, dumps

Source = Union[str, bytes, IO]


def group_by_text(
    messages: Iterable[CatalogEntry],
) -> dict[str, list[CatalogEntry]]:
    """Group messages by ``text``, keeping first-seen order.

    Context is not part of the key: two messages that only differ in
    ``msgctxt`` end up in the same group.
    """
    groups: dict[str, list[CatalogEntry]] = {}
    for message in messages:
        groups.setdefault(message.text, []).append(message)
    return groups


def _is_binary(sink: IO) -> bool:
    """Tell whether a sink takes bytes rather than text."""
    if isinstance(sink, (TextIOBase, codecs.StreamWriter, codecs.StreamReaderWriter)):
        return False
    if isinstance(sink, (RawIOBase, BufferedIOBase)):
        return True
    return "b" in getattr(sink, "mode", "")


def _group_references(group: list[CatalogEntry]) -> list[str]:
    return [reference for message in group for reference in message.references]


@dataclass(frozen=True)
class Catalog:
    """A PO/POT catalog: a header and the ordered messages."""

    entries: tuple[CatalogEntry, ...] = ()
    header: CatalogEntry = DEFAULT_HEADER

    def __post_init__(self):
        """Freeze the entry sequence."""
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def __iter__(self):
        """Iterate over the messages (the header excluded)."""
        return iter(self.entries)

    def __len__(self):
        """Return the number of messages."""
        return len(self.entries)

    def find(self, text: str) -> Optional[CatalogEntry]:
        """Return the first message with the given ``msgid``, or None."""
        return next((entry for entry in self.entries if entry.text == text), None)

    @classmethod
    def read(cls, source: Source) -> Catalog:
        """Read a catalog from text, UTF-8 bytes or a readable stream.

        Malformed content never raises; only I/O errors of the stream do.
        """
        if hasattr(source, "read"):
            source = source.read()
        entries, header = parse(source)
        return cls(tuple(entries), header)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Catalog:
        """Read a catalog file.

        :param path: Path to a ``.po`` or ``.pot`` file
        :raises OSError: If the file can't be read
        """
        return cls.read(Path(path).read_bytes())

    def dumps(self) -> str:
        """Render the catalog as PO/POT text."""
        return dumps(self.header, self.entries)

    def write(self, sink: IO) -> None:
        """Write the catalog to a text or binary stream (UTF-8).

        Sinks that are neither ``io`` nor ``codecs`` streams are treated as
        binary when their ``mode`` contains ``b``, and as text otherwise.
        """
        if _is_binary(sink):
            sink.write(self.dumps().encode("utf-8"))
        else:
            dump(self.header, self.entries, sink)

    def save(self, path: Union[str, Path]) -> None:
        """Write the catalog to a file, creating parent directories.

        :raises OSError: If the file can't be written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as fp:
            self.write(fp)

    @classmethod
    def from_unmerged(
        cls,
        messages: Iterable[CatalogEntry],
        header: CatalogEntry = DEFAULT_HEADER,
    ) -> Catalog:
        """Build a catalog from freshly extracted, possibly repeated messages.

        Messages sharing a ``text`` collapse into the first one, which gets
        the references of the whole group in encounter order.
        """
        merged = [
            replace(group[0], references=tuple(_group_references(group)))
            for group in group_by_text(messages).values()
        ]
        return cls(tuple(merged), header)

    def update(self, messages: Iterable[CatalogEntry]) -> Catalog:
        """Merge freshly extracted messages into this catalog.

        Known messages keep every field but get their references refreshed:
        references into files that were re-extracted are replaced by the new
        ones. Unknown messages are appended. Messages that were not
        extracted again are kept as they are.

        :param messages: Extracted messages, typically one reference each
        :return: New catalog with the same header
        """
        groups = group_by_text(messages)
        updated_entries = []

        for entry in self.entries:
            group = groups.pop(entry.text, None)
            if group is None:
                updated_entries.append(entry)
                continue

            new_references = _group_references(group)
            updated_paths = {reference_path(ref) for ref in new_references}
            kept_references = [
                ref
                for ref in entry.references
                if not any(ref.startswith(path) for path in updated_paths)
            ]
            updated_entries.append(
                replace(
                    entry,
                    references=sort_references(kept_references + new_references),
                )
            )

        for group in groups.values():
            updated_entries.append(
                replace(
                    group[0],
                    references=sort_references(_group_references(group)),
                )
            )

        return type(self)(tuple(updated_entries), self.header)
