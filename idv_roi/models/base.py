"""Shared pydantic base for records that cross the API boundary."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase field names.

    Python code uses the snake_case attribute names; the presentation layer
    and export documents see ``annualFraudSavings`` and friends. Overflowed
    results (inf, NaN) serialize as null.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_inf_nan="null",
    )

    def to_wire(self) -> dict:
        return json.loads(self.model_dump_json(by_alias=True))
