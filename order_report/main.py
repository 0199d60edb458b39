import base64
import hashlib

from fastapi import FastAPI, UploadFile, File, HTTPException

from .calculate import calculate_with_summary
from .errors import ReportError
from .models import HealthResponse, ReportResponse
from .reader import parse_orders_bytes
from .rules import OUTPUT_ENCODING
from .writer import serialize_orders

app = FastAPI(
    title="order-report",
    description="Order totals report from semicolon-delimited spreadsheet exports",
    version="0.1.0",
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/report", response_model=ReportResponse)
async def order_report(file: UploadFile = File(...)):
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    try:
        table, summary = calculate_with_summary(parse_orders_bytes(raw))
    except ReportError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    report_bytes = serialize_orders(table).encode(OUTPUT_ENCODING)
    return {
        "report_csv": {
            "sha256": hashlib.sha256(report_bytes).hexdigest(),
            "encoding": OUTPUT_ENCODING,
            "content_b64": base64.b64encode(report_bytes).decode("ascii"),
        },
        "summary": summary.model_dump(),
    }
