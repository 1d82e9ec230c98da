"""Export document for a calculation: {inputs, results, generatedDate}."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from idv_roi.engine.result import ROIResults
from idv_roi.models.inputs import CalculatorInputs
from idv_roi.reporting.models import ExportDocument


def build_export(
    inputs: CalculatorInputs,
    results: ROIResults,
    generated_date: Optional[datetime] = None,
) -> ExportDocument:
    if generated_date is None:
        generated_date = datetime.now(tz=timezone.utc)
    return ExportDocument(inputs=inputs, results=results, generated_date=generated_date)


def export_filename(generated_date: datetime) -> str:
    """roi-calculator-results-<epoch milliseconds>.json"""
    millis = int(generated_date.timestamp() * 1000)
    return f"roi-calculator-results-{millis}.json"


def export_json(document: ExportDocument) -> str:
    """Pretty-printed JSON with camelCase field names."""
    return document.model_dump_json(by_alias=True, indent=2)
