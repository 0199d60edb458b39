"""
Per-order totals and report summary rows.

Input rows are ``Date, Order ID, Order Item, Unit Price, Quantity`` with the
header first. Output rows gain a ``Total`` cell, and two summary rows are
appended: the grand total and the quantity ordered of the tracked item.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import DataError
from .models import ReportSummary
from .money import format_cents, parse_cents, parse_quantity
from .rules import (
    INPUT_COLUMNS,
    ITEM_COLUMN,
    PRICE_COLUMN,
    QUANTITY_COLUMN,
    SUM_LABEL,
    TOTAL_HEADER,
    TRACKED_ITEM,
    TRACKED_ITEM_LABEL,
)

Table = List[List[str]]


def _summary_row(label: str, quantity: str = "", total: str = "") -> List[str]:
    row = [""] * (INPUT_COLUMNS + 1)
    row[ITEM_COLUMN] = label
    row[QUANTITY_COLUMN] = quantity
    row[INPUT_COLUMNS] = total
    return row


def calculate_with_summary(
    rows: Sequence[Sequence[str]],
    tracked_item: str = TRACKED_ITEM,
    tracked_label: str = TRACKED_ITEM_LABEL,
) -> Tuple[Table, ReportSummary]:
    """
    Compute the report table and its aggregate figures.

    Returns a new table; ``rows`` is left untouched. Raises ``DataError`` for
    a missing header, a record that is not exactly five cells wide, or a
    price/quantity cell that does not parse.
    """
    if not rows:
        raise DataError("Table has no header row")

    out: Table = [list(rows[0]) + [TOTAL_HEADER]]
    grand_total = 0
    tracked_qty = 0

    for line, row in enumerate(rows[1:], start=2):
        item = row[ITEM_COLUMN] if len(row) > ITEM_COLUMN else ""
        if len(row) != INPUT_COLUMNS:
            raise DataError(
                f"Order '{item}' in row {line} has {len(row)} columns, expected {INPUT_COLUMNS}",
                item=item,
                line=line,
            )

        try:
            price = parse_cents(row[PRICE_COLUMN])
        except ValueError as exc:
            raise DataError(f"Cannot retrieve price of {item}: {exc}", item=item, line=line) from exc

        try:
            qty = parse_quantity(row[QUANTITY_COLUMN])
        except ValueError as exc:
            raise DataError(f"Cannot retrieve quantity of {item}: {exc}", item=item, line=line) from exc

        total = price * qty
        out.append(list(row) + [format_cents(total)])

        grand_total += total
        if item == tracked_item:
            tracked_qty += qty

    out.append(_summary_row(SUM_LABEL, total=format_cents(grand_total)))
    out.append(_summary_row(tracked_label, quantity=str(tracked_qty)))

    summary = ReportSummary(
        rows=len(rows) - 1,
        columns=INPUT_COLUMNS + 1,
        grand_total=format_cents(grand_total),
        grand_total_cents=grand_total,
        tracked_item=tracked_item,
        tracked_quantity=tracked_qty,
    )
    return out, summary


def calculate(
    rows: Sequence[Sequence[str]],
    tracked_item: str = TRACKED_ITEM,
    tracked_label: str = TRACKED_ITEM_LABEL,
) -> Table:
    table, _ = calculate_with_summary(rows, tracked_item=tracked_item, tracked_label=tracked_label)
    return table
