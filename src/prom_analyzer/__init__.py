"""prom-analyzer - Prometheus CPU metrics analyzed by Claude."""

from __future__ import annotations

import argparse
import asyncio
import sys


def main() -> None:
    """Run the prom-analyzer command line tool."""
    parser = argparse.ArgumentParser(
        description="prom-analyzer - Analyze Prometheus CPU metrics with Claude",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (a .env file in the working directory is also read):
  PROMETHEUS_BASE_URL      Prometheus API base URL, e.g. http://localhost:9090/api/v1
  ANTHROPIC_BASE_URL       Anthropic API base URL, e.g. https://api.anthropic.com/v1
  ANTHROPIC_API_KEY        Anthropic API key
  PROM_ANALYZER_TIMEOUT    Request timeout in seconds (default: 30)
  PROM_ANALYZER_LOG_LEVEL  Log level (default: WARNING)

Examples:
  # Interactive: choose model and duration
  prom-analyzer

  # Non-interactive
  prom-analyzer --model claude-3-5-haiku-20241022 --days 7
""",
    )
    parser.add_argument("--model", help="Model to use (skips the model prompt)")
    parser.add_argument("--days", help="Lookback in days (skips the duration prompt)")
    parser.add_argument("--query", help="PromQL expression (default: api-prod system CPU ratio)")
    parser.add_argument("--step", default="5m", help="Range query step (default: 5m)")
    parser.add_argument("--log-level", help="Override PROM_ANALYZER_LOG_LEVEL")
    args = parser.parse_args()

    from rich.markup import escape

    from prom_analyzer import console
    from prom_analyzer.client import DEFAULT_CPU_QUERY
    from prom_analyzer.config import load_settings
    from prom_analyzer.errors import PromAnalyzerError
    from prom_analyzer.logging_config import configure_logging
    from prom_analyzer.models import ClaudeModel
    from prom_analyzer.pipeline import run_analysis

    try:
        settings = load_settings()
    except PromAnalyzerError as e:
        console.err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    configure_logging(args.log_level or settings.log_level)

    try:
        if args.days is not None:
            days = console.parse_duration(args.days)
        else:
            days = console.choose_duration()
        if args.model:
            try:
                model = ClaudeModel(args.model)
            except ValueError:
                parser.error(
                    f"unknown model {args.model!r} (choose from: {', '.join(ClaudeModel.choices())})"
                )
        else:
            model = console.choose_model()

        with console.spinner() as status:
            result = asyncio.run(
                run_analysis(
                    settings,
                    model,
                    days,
                    query=args.query or DEFAULT_CPU_QUERY,
                    step=args.step,
                    on_stage=console.stage_updater(status),
                )
            )
    except PromAnalyzerError as e:
        console.err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    console.print_result(result)


__all__ = ["main"]
