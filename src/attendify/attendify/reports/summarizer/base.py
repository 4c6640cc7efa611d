from __future__ import annotations

from typing import Any, Mapping, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import SummarizerMalformed
from ..model import Report


class NarrativeSummarizer(Protocol):
    """External prose generator.

    Receives aggregated counts only and returns the raw report mapping.
    Implementations raise SummarizerError subclasses on failure.
    """

    def summarize(self, request: Mapping[str, Any]) -> Mapping[str, Any]:
        raise NotImplementedError


class ReportPayload(BaseModel):
    """Shape a summarizer response must have to be accepted."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    summary: str
    risks: list[str]
    actions: list[str]
    confidence_score: float = Field(alias="confidenceScore", ge=0, le=1)


def parse_report(raw: Any) -> Report:
    try:
        payload = ReportPayload.model_validate(raw)
    except PydanticValidationError as e:
        raise SummarizerMalformed(f"Invalid report payload: {e.error_count()} error(s)") from e
    return Report(
        summary=payload.summary,
        risks=tuple(payload.risks),
        actions=tuple(payload.actions),
        confidence_score=payload.confidence_score,
    )
