"""Sequential metric retrieval and analysis pipeline."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from prom_analyzer.client import DEFAULT_CPU_QUERY, DEFAULT_STEP, PrometheusClient
from prom_analyzer.llm import AnthropicClient
from prom_analyzer.prompts import build_prompt
from prom_analyzer.utils.timerange import get_range_date

if TYPE_CHECKING:
    from collections.abc import Callable

    from prom_analyzer.config import PromAnalyzerSettings
    from prom_analyzer.models import AnalysisResult, ClaudeModel

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """Pipeline states, in order."""

    IDLE = "idle"
    RANGE_COMPUTED = "range_computed"
    METRICS_FETCHED = "metrics_fetched"
    PROMPT_BUILT = "prompt_built"
    ANALYSIS_COMPLETE = "analysis_complete"


async def run_analysis(
    settings: PromAnalyzerSettings,
    model: ClaudeModel | str,
    lookback_days: int,
    *,
    query: str = DEFAULT_CPU_QUERY,
    step: str = DEFAULT_STEP,
    on_stage: Callable[[PipelineStage], None] | None = None,
) -> AnalysisResult:
    """Fetch a metric range and have it analyzed.

    Stages run strictly in order and the first error aborts the run.

    Args:
        settings: Backend URLs, API key and timeout.
        model: Model to analyze with.
        lookback_days: Days of history to query.
        query: PromQL expression.
        step: Range query resolution.
        on_stage: Called after each stage transition.

    Returns:
        The analysis response.

    Raises:
        PromAnalyzerError: From whichever stage failed first.
    """

    def advance(stage: PipelineStage) -> None:
        logger.debug("Pipeline stage: %s", stage.value)
        if on_stage is not None:
            on_stage(stage)

    advance(PipelineStage.IDLE)

    time_range = get_range_date(lookback_days)
    advance(PipelineStage.RANGE_COMPUTED)

    async with PrometheusClient(settings.prometheus_base_url, timeout=settings.timeout) as prom:
        envelope = await prom.query_range(query, time_range, step=step)
    advance(PipelineStage.METRICS_FETCHED)

    prompt = build_prompt(envelope.data)
    advance(PipelineStage.PROMPT_BUILT)

    async with AnthropicClient(
        settings.anthropic_base_url,
        settings.anthropic_api_key,
        timeout=settings.timeout,
    ) as llm:
        result = await llm.send_message(model, prompt)
    advance(PipelineStage.ANALYSIS_COMPLETE)

    return result


__all__ = ["PipelineStage", "run_analysis"]
