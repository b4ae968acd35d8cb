"""Text and JSON rendering of a finished report."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from claw_deps.models import EcosystemReport, SeverityCounts

NOT_DETECTED_MSG = "No supported package manager detected"

# Buckets shown under the security section, in display order
SEVERITY_LABELS = (
    ("critical", "Critical"),
    ("high", "High"),
    ("moderate", "Moderate"),
    ("low", "Low"),
)


def make_console(stderr: bool = False) -> Console:
    """Plain console: no highlighting, no emoji codes, no hard wrapping."""
    return Console(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def render_json(report: EcosystemReport) -> str:
    return json.dumps(report.to_dict(), indent=2, default=str)


def render_not_detected_json(path: str) -> str:
    return json.dumps({"error": NOT_DETECTED_MSG, "path": path})


def print_header(manager: str, path: str, console: Console | None = None) -> None:
    console = console or make_console()
    console.print(f"📦 Checking {escape(manager)} dependencies in {escape(path)}")
    console.print()


def print_not_detected(path: str, console: Console | None = None) -> None:
    console = console or make_console(stderr=True)
    console.print(f"❌ {NOT_DETECTED_MSG}")
    console.print(f"   Looked in: {escape(path)}")


def print_outdated(report: EcosystemReport, console: Console) -> None:
    if not report.outdated:
        return
    console.print("📋 Outdated packages:")
    for entry in report.outdated:
        name, current, latest = escape(entry.name), escape(entry.current), escape(entry.latest)
        console.print(f"   {name}: {current} → {latest}")
    console.print()


def print_security(report: EcosystemReport, console: Console) -> None:
    if report.vulnerable <= 0:
        return
    console.print(f"🔒 Security: {report.vulnerable} vulnerabilities found")
    breakdown = report.vulnerabilities
    if isinstance(breakdown, SeverityCounts):
        for key, label in SEVERITY_LABELS:
            if breakdown.get(key):
                console.print(f"   {label}: {breakdown.get(key)}")
    console.print()


def print_info(report: EcosystemReport, console: Console) -> None:
    console.print(f"📦 Package manager: {escape(report.manager)}")
    console.print(f"📁 Path: {escape(report.path)}")
    console.print(f"📊 Outdated: {report.outdated_count}")
    console.print(f"🔒 Vulnerabilities: {report.vulnerable}")


def print_report(
    report: EcosystemReport, command: str = "check", console: Console | None = None
) -> None:
    """Print a report for the given command in human-readable form.

    Args:
        report: Finalized report.
        command: One of check, outdated, audit, info.
        console: Console to print to (stdout by default).
    """
    console = console or make_console()

    if report.error is not None:
        make_console(stderr=True).print(f"❌ {escape(report.error)}: {escape(report.manager)}")
        return

    console.print(report.summary)
    console.print()

    if command in ("outdated", "check"):
        print_outdated(report, console)
    if command in ("audit", "check"):
        print_security(report, console)
    if command == "info":
        print_info(report, console)

    if report.notes:
        console.print(f"\n[dim]Scan notes: {escape(', '.join(report.notes))}[/]")
