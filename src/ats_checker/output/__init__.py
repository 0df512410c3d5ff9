"""Output formatting."""

from ats_checker.output.markdown import format_analysis_result, save_markdown

__all__ = ["format_analysis_result", "save_markdown"]
