"""Terminal interaction: prompts, status spinner and result output."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from prom_analyzer.errors import InputError
from prom_analyzer.models import ClaudeModel

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from rich.status import Status

    from prom_analyzer.models import AnalysisResult
    from prom_analyzer.pipeline import PipelineStage

logger = logging.getLogger(__name__)

DEFAULT_DURATION_DAYS = 8
MIN_DURATION_DAYS = 1
MAX_DURATION_DAYS = 365

STAGE_MESSAGES = {
    "idle": "Preparing",
    "range_computed": "Fetching Metric",
    "metrics_fetched": "Building Prompt",
    "prompt_built": "Analyzing Log",
    "analysis_complete": "Analyze Completed",
}

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def warn(message: str) -> None:
    """Log a warning and show it on stderr."""
    logger.warning(message)
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def parse_duration(raw: str) -> int:
    """Turn free-text duration input into a lookback in days.

    Unparsable input falls back to DEFAULT_DURATION_DAYS and values outside
    MIN_DURATION_DAYS..MAX_DURATION_DAYS are clamped, both with a warning.
    """
    try:
        days = int(raw.strip())
    except ValueError:
        warn(f"Invalid duration {raw!r}, using default of {DEFAULT_DURATION_DAYS} days")
        return DEFAULT_DURATION_DAYS

    clamped = min(max(days, MIN_DURATION_DAYS), MAX_DURATION_DAYS)
    if clamped != days:
        warn(f"Duration {days} is out of range, using {clamped} days")
    return clamped


def choose_duration() -> int:
    """Ask for the lookback duration in days."""
    try:
        raw = Prompt.ask("Choose duration", console=console)
    except EOFError as e:
        raise InputError("Failed to read duration: end of input") from e
    days = parse_duration(raw)
    console.print(days)
    return days


def choose_model() -> ClaudeModel:
    """Ask which model to analyze with."""
    choices = ClaudeModel.choices()
    for index, name in enumerate(choices, start=1):
        console.print(f"  {index}. {name}")
    try:
        answer = Prompt.ask(
            "Choose model",
            console=console,
            choices=[str(i) for i in range(1, len(choices) + 1)] + choices,
            default="1",
            show_choices=False,
        )
    except EOFError as e:
        raise InputError("Failed to read model: end of input") from e
    if answer.isdigit():
        return ClaudeModel(choices[int(answer) - 1])
    return ClaudeModel(answer)


@contextmanager
def spinner(message: str = "Analyzing Log") -> Iterator[Status]:
    """Show a spinner on stderr until the block exits, then print the outcome.

    The spinner is always stopped; the final line reads "Analyze Completed"
    on success and "Analyze Failed" when the block raised.
    """
    status = err_console.status(message, spinner="dots", refresh_per_second=10)
    status.start()
    try:
        yield status
    except BaseException:
        status.stop()
        err_console.print("[red]✗[/red] Analyze Failed")
        raise
    status.stop()
    err_console.print("[green]✓[/green] Analyze Completed")


def stage_updater(status: Status) -> Callable[[PipelineStage], None]:
    """Return an on_stage callback that relabels the spinner."""

    def update(stage: PipelineStage) -> None:
        status.update(STAGE_MESSAGES.get(stage.value, stage.value))

    return update


def print_result(result: AnalysisResult) -> None:
    """Print usage counts followed by the analysis text."""
    # plain print: model output may contain rich markup
    print(f"Usage Token Input: {result.usage.input_tokens}")
    print(f"Usage Token Ouput: {result.usage.output_tokens}")
    print(result.text)


__all__ = [
    "DEFAULT_DURATION_DAYS",
    "MAX_DURATION_DAYS",
    "MIN_DURATION_DAYS",
    "choose_duration",
    "choose_model",
    "parse_duration",
    "print_result",
    "spinner",
    "stage_updater",
    "warn",
]
