"""Parsers for package-manager command output.

Every parser takes raw command text and returns a ``Parsed`` value. A parse
failure never raises: it returns the empty branch with an error message, and
the adapter decides what to do with it.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from claw_deps.models import AdvisoryList, OutdatedEntry, SeverityCounts

T = TypeVar("T")

GO_UPDATE_LINE = re.compile(r"^(\S+)\s+(\S+)\s+\[(\S+)\]")
CARGO_UPDATE_LINE = re.compile(r"Updating\s+(\S+)\s+v(\S+)\s+->\s+v(\S+)")


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Parse result: a value, or an empty value plus the reason."""

    value: T
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def empty(cls, value: T, error: str) -> Parsed[T]:
        return cls(value=value, error=error)


@dataclass(frozen=True)
class AuditFindings:
    """Vulnerability total plus the ecosystem-specific breakdown."""

    total: int = 0
    breakdown: SeverityCounts | AdvisoryList | None = None


NO_FINDINGS = AuditFindings()


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def parse_json(text: str, expect: type | tuple[type, ...], default: Any) -> Parsed[Any]:
    """Parse JSON text whose top level must be of type ``expect``.

    Empty output means the tool reported nothing and yields ``default``.
    """
    if not text.strip():
        return Parsed(default)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Parsed.empty(default, f"Invalid JSON: {e}")
    if not isinstance(data, expect):
        return Parsed.empty(default, f"Unexpected JSON top level: {type(data).__name__}")
    return Parsed(data)


def parse_npm_outdated(text: str) -> Parsed[list[OutdatedEntry]]:
    """Parse ``npm outdated --json``: {name: {current, wanted, latest, type}}."""
    parsed = parse_json(text, dict, {})
    if not parsed.ok:
        return Parsed.empty([], parsed.error or "")

    entries: list[OutdatedEntry] = []
    for name, info in parsed.value.items():
        # a package installed in several workspaces is reported as a list
        candidates = info if isinstance(info, list) else [info]
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            current, latest = candidate.get("current"), candidate.get("latest")
            if not (_is_text(name) and _is_text(current) and _is_text(latest)):
                continue
            entries.append(
                OutdatedEntry(
                    name=name,
                    current=current,
                    latest=latest,
                    wanted=candidate.get("wanted") if _is_text(candidate.get("wanted")) else None,
                    kind=candidate.get("type") if _is_text(candidate.get("type")) else None,
                )
            )
    return Parsed(entries)


def parse_npm_audit(text: str) -> Parsed[AuditFindings]:
    """Parse ``npm audit --json`` using ``metadata.vulnerabilities``."""
    parsed = parse_json(text, dict, {})
    if not parsed.ok:
        return Parsed.empty(NO_FINDINGS, parsed.error or "")

    metadata = parsed.value.get("metadata")
    buckets = metadata.get("vulnerabilities") if isinstance(metadata, dict) else None
    if not isinstance(buckets, dict):
        buckets = {}

    counts = SeverityCounts(buckets)
    return Parsed(AuditFindings(total=counts.get("total"), breakdown=counts))


def parse_pip_outdated(text: str) -> Parsed[list[OutdatedEntry]]:
    """Parse ``pip list --outdated --format=json``."""
    parsed = parse_json(text, list, [])
    if not parsed.ok:
        return Parsed.empty([], parsed.error or "")

    entries = []
    for pkg in parsed.value:
        if not isinstance(pkg, dict):
            continue
        name, current, latest = pkg.get("name"), pkg.get("version"), pkg.get("latest_version")
        if not (_is_text(name) and _is_text(current) and _is_text(latest)):
            continue
        kind = pkg.get("latest_filetype")
        entries.append(
            OutdatedEntry(
                name=name,
                current=current,
                latest=latest,
                kind=kind if _is_text(kind) else None,
            )
        )
    return Parsed(entries)


def parse_pip_audit(text: str) -> Parsed[AuditFindings]:
    """Parse ``pip-audit --format=json``.

    Older releases print a list of findings. Current releases print
    ``{"dependencies": [...], "fixes": [...]}`` listing every dependency;
    only those with vulnerabilities are kept.
    """
    parsed = parse_json(text, (list, dict), [])
    if not parsed.ok:
        return Parsed.empty(NO_FINDINGS, parsed.error or "")

    data = parsed.value
    if isinstance(data, dict):
        dependencies = data.get("dependencies")
        if not isinstance(dependencies, list):
            return Parsed.empty(NO_FINDINGS, "pip-audit output has no dependency list")
        findings = [d for d in dependencies if isinstance(d, dict) and d.get("vulns")]
    else:
        findings = data

    return Parsed(AuditFindings(total=len(findings), breakdown=AdvisoryList(findings)))


def parse_go_list(text: str) -> Parsed[list[OutdatedEntry]]:
    """Parse ``go list -m -u all``: ``<module> <version> [<newer>]`` lines."""
    entries = []
    for line in text.splitlines():
        if "[" not in line:
            continue
        match = GO_UPDATE_LINE.match(line)
        if match:
            entries.append(
                OutdatedEntry(name=match.group(1), current=match.group(2), latest=match.group(3))
            )
    return Parsed(entries)


def parse_cargo_outdated(text: str) -> Parsed[list[OutdatedEntry]]:
    """Parse ``cargo outdated --format=json``.

    ``dependencies`` is a name -> {project, latest} mapping, or a list of
    objects carrying their own ``name``.
    """
    parsed = parse_json(text, dict, {})
    if not parsed.ok:
        return Parsed.empty([], parsed.error or "")

    dependencies = parsed.value.get("dependencies") or {}
    if isinstance(dependencies, dict):
        items = [(name, info) for name, info in dependencies.items()]
    elif isinstance(dependencies, list):
        items = [(d.get("name"), d) for d in dependencies if isinstance(d, dict)]
    else:
        return Parsed.empty([], "cargo outdated dependencies has unexpected shape")

    entries = []
    for name, info in items:
        if not isinstance(info, dict):
            continue
        current, latest = info.get("project"), info.get("latest")
        if _is_text(name) and _is_text(current) and _is_text(latest):
            entries.append(OutdatedEntry(name=name, current=current, latest=latest))
    return Parsed(entries)


def parse_cargo_update(text: str) -> Parsed[list[OutdatedEntry]]:
    """Parse ``cargo update --dry-run``: ``Updating foo v1.0.0 -> v1.2.0``."""
    entries = []
    for line in text.splitlines():
        if "Updating" not in line:
            continue
        match = CARGO_UPDATE_LINE.search(line)
        if match:
            entries.append(
                OutdatedEntry(name=match.group(1), current=match.group(2), latest=match.group(3))
            )
    return Parsed(entries)


def parse_cargo_audit(text: str) -> Parsed[AuditFindings]:
    """Parse ``cargo audit --json`` using ``vulnerabilities.list``."""
    parsed = parse_json(text, dict, {})
    if not parsed.ok:
        return Parsed.empty(NO_FINDINGS, parsed.error or "")

    vulnerabilities = parsed.value.get("vulnerabilities")
    advisories = vulnerabilities.get("list") if isinstance(vulnerabilities, dict) else None
    if not isinstance(advisories, list):
        advisories = []
    return Parsed(AuditFindings(total=len(advisories), breakdown=AdvisoryList(advisories)))
