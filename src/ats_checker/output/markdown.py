"""Markdown output formatting."""

from pathlib import Path

from ats_checker.models.result import ATSAnalysisResult


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _bullets(items: list[str], empty: str = "None") -> list[str]:
    if not items:
        return [f"- *{empty}*"]
    return [f"- {item}" for item in items]


def format_analysis_result(result: ATSAnalysisResult) -> str:
    """Format an analysis result as markdown.

    Args:
        result: Analysis result.

    Returns:
        Markdown report with score breakdown, keywords, suggestions and warnings.
    """
    breakdown = result.breakdown
    output = [f"## ATS Analysis (Score: {result.score:g}/100)", ""]

    output.append("### Score Breakdown")
    output.append(f"- **Skills:** {breakdown.skills:g}")
    output.append(f"- **Experience:** {breakdown.experience:g}")
    output.append(f"- **Keywords:** {breakdown.keywords:g}")
    output.append(f"- **Education:** {breakdown.education:g}")
    output.append("")

    output.append("### Matched Keywords")
    output.extend(_bullets(result.matched_keywords))
    output.append("")

    output.append("### Missing Keywords")
    output.extend(_bullets(result.missing_keywords))
    output.append("")

    if result.overused_keywords:
        output.append("### Overused Keywords")
        output.extend(_bullets(result.overused_keywords))
        output.append("")

    output.append("### Suggestions")
    output.extend(_bullets(result.suggestions))
    output.append("")

    output.append("### Warnings")
    output.extend(_bullets(result.warnings))

    return "\n".join(output)
