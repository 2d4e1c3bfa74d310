"""Typed models for query inputs and response documents."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from heatindex.errors import QueryParameterError

# ─────────────────────────── primitives ──────────────────────────────────────


class Measurement(BaseModel):
    """A numeric value tagged with its unit of measure."""

    uom: str
    value: float


class InputRecord(BaseModel):
    """Values accumulated from the query while it is being validated.

    Temperatures are held in degrees Celsius, relative humidity in percent.
    ``parsed`` names the fields that were read successfully from the query;
    fields that were never supplied keep their zero default.
    """

    model_config = ConfigDict(frozen=True)

    air_temp: float = 0.0
    dew_temp: float = 0.0
    relative_humidity: float = 0.0
    parsed: frozenset[str] = frozenset()

    def has(self, field: str) -> bool:
        """Whether ``field`` was parsed from the query."""
        return field in self.parsed

    def with_value(self, field: str, value: float) -> InputRecord:
        """Return a copy with ``field`` set and marked as parsed."""
        return self.model_copy(update={field: value, "parsed": self.parsed | {field}})

    def converted(self, field: str, value: float) -> InputRecord:
        """Return a copy with ``field`` replaced by a unit-converted value."""
        return self.model_copy(update={field: value})


# ─────────────────────────── response ────────────────────────────────────────


class QueryResponse(BaseModel):
    """Result of validating and evaluating one query.

    ``valid`` only ever goes from True to False. The error fields hold the
    details of the last rule that was violated.
    """

    valid: bool = True
    status: Literal["success", "error"] = "success"
    message: str | None = None
    expected: str | None = None
    actual: str | None = None
    data: dict[str, Measurement] = Field(default_factory=dict)
    input: InputRecord = Field(default_factory=InputRecord)

    def with_error(self, error: QueryParameterError) -> QueryResponse:
        """Return a copy marked invalid and carrying ``error``'s details."""
        return self.model_copy(update={"valid": False, **error.as_document()})

    def with_input(self, record: InputRecord) -> QueryResponse:
        """Return a copy holding an updated input record."""
        return self.model_copy(update={"input": record})

    def with_data(self, field: str, measurement: Measurement) -> QueryResponse:
        """Return a copy with ``measurement`` stored under ``data[field]``."""
        return self.model_copy(update={"data": {**self.data, field: measurement}})

    def to_document(self) -> dict[str, Any]:
        """Render the externally visible document.

        Returns:
            ``status`` and ``data`` on success; ``status``, ``message``,
            ``expected`` and ``actual`` on error
        """
        if not self.valid:
            return self.model_dump(include={"status", "message", "expected", "actual"})
        return self.model_dump(include={"status", "data"})
