from __future__ import annotations

from pydantic import BaseModel, Field

from .rules import OUTPUT_ENCODING, TRACKED_ITEM


class ReportCsv(BaseModel):
    sha256: str
    encoding: str = Field(default=OUTPUT_ENCODING)
    content_b64: str


class ReportSummary(BaseModel):
    rows: int = 0
    columns: int = 0
    grand_total: str = Field(default="0.00", examples=["811.65"])
    grand_total_cents: int = 0
    tracked_item: str = Field(default=TRACKED_ITEM)
    tracked_quantity: int = 0


class ReportResponse(BaseModel):
    report_csv: ReportCsv
    summary: ReportSummary


class HealthResponse(BaseModel):
    ok: bool = True
