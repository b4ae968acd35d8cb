"""Summary line and exit status derived from a report's counts."""

from __future__ import annotations

from enum import IntEnum

from claw_deps.models import EcosystemReport

ALL_CLEAR_SECURE = "✅ All dependencies up to date and secure"
ALL_CLEAR = "✅ All dependencies up to date"
WARNING_PREFIX = "⚠️  "


class Severity(IntEnum):
    """Overall report status. The value is the process exit code."""

    CLEAN = 0
    OUTDATED = 1
    VULNERABLE = 2


def summarize(outdated_count: int, vulnerable_count: int, claims_secure: bool = True) -> str:
    """Build the one-line display summary.

    ``claims_secure`` picks the "and secure" phrasing for the all-clear
    message; it is False for ecosystems without a bundled audit.
    """
    if outdated_count == 0 and vulnerable_count == 0:
        return ALL_CLEAR_SECURE if claims_secure else ALL_CLEAR

    parts = []
    if outdated_count > 0:
        parts.append(f"{outdated_count} outdated")
    if vulnerable_count > 0:
        parts.append(f"{vulnerable_count} vulnerabilities")
    return WARNING_PREFIX + ", ".join(parts)


def finalize(report: EcosystemReport, claims_secure: bool = True) -> EcosystemReport:
    """Fill in the report summary from its counts."""
    if report.error is None:
        report.summary = summarize(report.outdated_count, report.vulnerable, claims_secure)
    return report


def classify(report: EcosystemReport) -> Severity:
    """Vulnerabilities outrank outdated packages."""
    if report.vulnerable > 0:
        return Severity.VULNERABLE
    if report.outdated_count > 0:
        return Severity.OUTDATED
    return Severity.CLEAN


def exit_code(report: EcosystemReport) -> int:
    """Process exit code for a finished report."""
    if report.error is not None:
        return 1
    return int(classify(report))
