from __future__ import annotations

import csv
import io
import os
from typing import Sequence

from .errors import WriteError
from .logging_setup import get_logger
from .rules import OUTPUT_DELIMITER, OUTPUT_ENCODING

logger = get_logger("order_report.writer")


def serialize_orders(rows: Sequence[Sequence[str]], delimiter: str = OUTPUT_DELIMITER) -> str:
    """Render rows as delimited text, one record per line."""
    outp = io.StringIO(newline="")
    writer = csv.writer(outp, delimiter=delimiter, lineterminator="\n")
    writer.writerows(rows)
    return outp.getvalue()


def write_orders(path: str | os.PathLike, rows: Sequence[Sequence[str]]) -> None:
    """
    Write the report table to ``path`` as comma-delimited text.

    The file is written in place. A failure part way through can leave a
    partial file behind.
    """
    text = serialize_orders(rows)
    try:
        with open(path, "w", encoding=OUTPUT_ENCODING, newline="") as f:
            f.write(text)
    except OSError as exc:
        raise WriteError(f"Cannot write '{os.fspath(path)}': {exc}") from exc

    logger.debug("wrote %d rows to %s", len(rows), os.fspath(path))
