"""FastAPI application for the identity verification ROI calculator."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from idv_roi import __version__
from idv_roi.config import get_settings
from idv_roi.engine import ROIEngine
from idv_roi.models.inputs import CalculatorInputs, default_inputs
from idv_roi.reporting import build_export, build_report, export_filename, export_json
from idv_roi.tables import get_default_tables

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Identity Verification ROI API", version=__version__)

# CORS: allow the calculator front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Tables are immutable after load; the engine only caches pure results
tables = get_default_tables()
engine = ROIEngine(tables)


def _parse_form(raw: dict[str, Any]) -> CalculatorInputs:
    try:
        return CalculatorInputs.from_form(raw, tables)
    except ValueError as e:
        logger.info("Rejected calculator form: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/api/tables")
async def get_tables():
    """Industry and company-size options with their constants."""
    return tables.model_dump(mode="json")


@app.get("/api/defaults")
async def get_defaults():
    """Starting form values for the loaded table variant."""
    return default_inputs(tables).to_wire()


@app.post("/api/calculate")
async def calculate(raw: dict[str, Any] = Body(default={})):
    """Recompute results and derived views for the submitted form state."""
    inputs = _parse_form(raw)
    return build_report(inputs, engine).to_wire()


@app.post("/api/export")
async def export(raw: dict[str, Any] = Body(default={})):
    """Return {inputs, results, generatedDate} as a downloadable JSON file."""
    inputs = _parse_form(raw)
    document = build_export(inputs, engine.calculate(inputs))
    filename = export_filename(document.generated_date)
    logger.info("Exporting %s", filename)
    return Response(
        content=export_json(document),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn (``idv-roi-api`` console script)."""
    import uvicorn

    uvicorn.run(
        "idv_roi.main:app",
        host="127.0.0.1",
        port=8000,
        log_level=settings.log_level.lower(),
    )
