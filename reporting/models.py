from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel

from validations.errors import FailureKind, ValidationError, render_parameter


class FailureReport(BaseModel):
    kind: FailureKind
    code: str
    message: str
    parameters: list[str]
    timestamp: datetime


def build_report(error: ValidationError) -> FailureReport:
    """Serializable view of a raised failure; parameters are rendered as text."""
    return FailureReport(
        kind=error.kind,
        code=error.code,
        message=error.message,
        parameters=[render_parameter(p) for p in error.parameters],
        timestamp=datetime.now(timezone.utc),
    )
