from __future__ import annotations

from dosname.models import ListingSummary


def build_synthetic_report(summary: ListingSummary) -> str:
    lines: list[str] = ["DOSNAME - Summary report", "=" * 32]
    for item in summary.names:
        lines.append(f"{item.source} -> {item.dos_name} | {item.status.upper()}")
    return "\n".join(lines)


def build_technical_report(summary: ListingSummary) -> str:
    lines: list[str] = ["DOSNAME - Technical report", "=" * 32, f"Profile: {summary.profile}", ""]
    for item in summary.names:
        lines.append(item.source)
        lines.append(f"  Status: {item.status.upper()} | DOS name: {item.dos_name}")
        for issue in item.issues:
            lines.append(f"  [{issue.level.upper()}] {issue.code}: {issue.message}")
        lines.append("")
    return "\n".join(lines)
