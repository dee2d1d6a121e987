"""Pydantic models for the Prometheus and Anthropic wire formats."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

SECONDS_PER_DAY = 86400


class ClaudeModel(str, Enum):
    """Models that may be sent to the Messages API."""

    CLAUDE_OPUS_4 = "claude-opus-4-20250514"
    CLAUDE_SONNET_4 = "claude-sonnet-4-20250514"
    CLAUDE_3_7_SONNET = "claude-3-7-sonnet-20250219"
    CLAUDE_3_5_HAIKU = "claude-3-5-haiku-20241022"
    CLAUDE_3_5_SONNET_V2 = "claude-3-5-sonnet-20241022"
    CLAUDE_3_5_SONNET = "claude-3-5-sonnet-20240620"
    CLAUDE_3_HAIKU = "claude-3-haiku-20240307"

    @classmethod
    def choices(cls) -> list[str]:
        """Wire identifiers in display order."""
        return [m.value for m in cls]


class TimeRange(BaseModel):
    """Unix-second query window ending at capture time."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(description="Window start (Unix seconds)")
    end: int = Field(description="Window end (Unix seconds)")

    @model_validator(mode="after")
    def _check_order(self) -> TimeRange:
        if self.start >= self.end:
            raise ValueError("start must be before end")
        return self

    @property
    def days(self) -> float:
        """Window length in days."""
        return (self.end - self.start) / SECONDS_PER_DAY


class MetricSeries(BaseModel):
    """One label set and its samples from a range query."""

    metric: dict[str, str] = Field(default_factory=dict, description="Label name to value")
    values: list[tuple[float, str]] = Field(
        default_factory=list, description="(timestamp, value) samples in backend order"
    )


class MetricQueryResult(BaseModel):
    """The data portion of a Prometheus query response."""

    model_config = ConfigDict(populate_by_name=True)

    result_type: str = Field(alias="resultType", description="matrix, vector, scalar or string")
    result: list[MetricSeries] = Field(default_factory=list, description="Returned series")


class PrometheusResponse(BaseModel):
    """Prometheus HTTP API envelope."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(description="success or error")
    data: MetricQueryResult | None = Field(default=None)
    error_type: str | None = Field(default=None, alias="errorType")
    error: str | None = Field(default=None)
    warnings: list[str] = Field(default_factory=list)


class MessageContent(BaseModel):
    """A single conversation turn."""

    role: str
    content: str


class AnalysisRequest(BaseModel):
    """Messages API request body."""

    model: ClaudeModel
    max_tokens: int = 1024
    messages: list[MessageContent]


class Usage(BaseModel):
    """Token accounting for a completion."""

    input_tokens: int
    output_tokens: int


class ContentBlock(BaseModel):
    """A generated content block."""

    type: str = "text"
    text: str


class AnalysisResult(BaseModel):
    """Messages API response body."""

    role: str
    model: str
    usage: Usage
    content: list[ContentBlock]

    @property
    def text(self) -> str:
        """Primary analysis text (first content block)."""
        return self.content[0].text


__all__ = [
    "SECONDS_PER_DAY",
    "AnalysisRequest",
    "AnalysisResult",
    "ClaudeModel",
    "ContentBlock",
    "MessageContent",
    "MetricQueryResult",
    "MetricSeries",
    "PrometheusResponse",
    "TimeRange",
    "Usage",
]
