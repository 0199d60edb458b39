"""
Read the day's order export, add totals, write the report.

Run as ``python -m order_report.pipeline``; the paths are the fixed
constants in ``order_report.rules``.
"""

from __future__ import annotations

import os

from .calculate import calculate_with_summary
from .errors import ReportError
from .logging_setup import configure_logging, get_logger
from .models import ReportSummary
from .reader import read_orders
from .rules import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
from .writer import write_orders

logger = get_logger("order_report.pipeline")


def run(
    input_path: str | os.PathLike = DEFAULT_INPUT_PATH,
    output_path: str | os.PathLike = DEFAULT_OUTPUT_PATH,
) -> ReportSummary:
    rows = read_orders(input_path)
    table, summary = calculate_with_summary(rows)
    write_orders(output_path, table)

    logger.info(
        "report written to %s: %d orders, total %s, %s quantity %d",
        os.fspath(output_path),
        summary.rows,
        summary.grand_total,
        summary.tracked_item,
        summary.tracked_quantity,
    )
    return summary


def main() -> int:
    configure_logging()
    try:
        run()
    except ReportError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
