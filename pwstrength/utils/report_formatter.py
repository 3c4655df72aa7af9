"""Plain-text rendering of evaluation reports for the terminal."""

from __future__ import annotations

from pwstrength.evaluator import CriterionResult, EvaluationReport

NAME_WIDTH = 30
RULE = "-" * 54

HEADER = "--- Password Strength Analyzer ---"
PROMPT = "Enter your password: "
NO_PASSWORD = "No password entered."


def format_result_line(result: CriterionResult) -> str:
    marker = "[PASS]" if result.passed else "[FAIL]"
    return f"  {marker} {result.name:<{NAME_WIDTH}} | {result.message}"


def format_report(report: EvaluationReport) -> str:
    """Render a report as the multi-line block printed after the prompt.

    Args:
        report: A report for a non-empty password.

    Returns:
        The block without a trailing newline.
    """
    lines = [
        "",
        RULE,
        f"Strength Score: {report.total_score}/{report.max_score} ({report.strength.value})",
        "Evaluation Criteria:",
        RULE,
    ]
    lines.extend(format_result_line(r) for r in report.results)
    lines.append(RULE)
    return "\n".join(lines)
