"""
Reading the semicolon-delimited order export.

The whole file is read at once; any decode or parse problem aborts the read
with no partial table.
"""

from __future__ import annotations

import csv
import io
import os
from typing import List

from charset_normalizer import from_bytes

from .errors import FormatError, ReadError
from .logging_setup import get_logger
from .rules import INPUT_DELIMITER, LEGACY_ENCODINGS

Table = List[List[str]]

logger = get_logger("order_report.reader")


def decode_bytes(raw: bytes) -> str:
    """
    Decode raw input bytes to text.

    Rules:
    - Strict UTF-8 first; a leading BOM is dropped.
    - Otherwise let charset-normalizer pick among LEGACY_ENCODINGS; an
      unrestricted guess reads short Latin-1 text as cp1250.
    - No usable guess is a format error.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw, cp_isolation=LEGACY_ENCODINGS).best()
    if match is None:
        raise FormatError("Cannot determine the text encoding of the input")

    logger.debug("input decoded as %s", match.encoding)
    try:
        return raw.decode(match.encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise FormatError(f"Cannot decode input as {match.encoding}: {exc}") from exc


def parse_orders_text(text: str, delimiter: str = INPUT_DELIMITER) -> Table:
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    rows: Table = []
    width = None

    try:
        for row in reader:
            if not row:
                continue
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise FormatError(
                    f"record on line {reader.line_num}: wrong number of fields "
                    f"(expected {width}, got {len(row)})",
                    line=reader.line_num,
                )
            rows.append(row)
    except csv.Error as exc:
        raise FormatError(f"Cannot read CSV data on line {reader.line_num}: {exc}", line=reader.line_num) from exc

    return rows


def parse_orders_bytes(raw: bytes, delimiter: str = INPUT_DELIMITER) -> Table:
    return parse_orders_text(decode_bytes(raw), delimiter=delimiter)


def read_orders(path: str | os.PathLike, delimiter: str = INPUT_DELIMITER) -> Table:
    """Read the order file at ``path`` into a list of rows of text cells."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise ReadError(f"Cannot open '{os.fspath(path)}': {exc}") from exc

    rows = parse_orders_bytes(raw, delimiter=delimiter)
    logger.debug("read %d rows from %s", len(rows), os.fspath(path))
    return rows
