"""Prompt templates for metric analysis."""

from prom_analyzer.prompts.cpu import CPU_ANALYSIS_TEMPLATE, build_prompt, serialize_result

__all__ = ["CPU_ANALYSIS_TEMPLATE", "build_prompt", "serialize_result"]
