"""Normalized report types shared by every ecosystem adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Ecosystem(str, Enum):
    """Package-manager ecosystems claw-deps knows how to check."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
    PIP = "pip"
    PIPENV = "pipenv"
    POETRY = "poetry"
    GO = "go"
    CARGO = "cargo"

    @property
    def family(self) -> str:
        """Adapter family this ecosystem is checked with."""
        if self in (Ecosystem.NPM, Ecosystem.YARN, Ecosystem.PNPM, Ecosystem.BUN):
            return "npm"
        if self in (Ecosystem.PIP, Ecosystem.PIPENV, Ecosystem.POETRY):
            return "pip"
        return self.value


@dataclass
class OutdatedEntry:
    """A dependency with a newer version available."""

    name: str
    current: str
    latest: str
    wanted: str | None = None  # npm family only
    kind: str | None = None  # dependencies, devDependencies, wheel, ...

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "current": self.current}
        if self.wanted is not None:
            data["wanted"] = self.wanted
        data["latest"] = self.latest
        if self.kind is not None:
            data["type"] = self.kind
        return data


@dataclass
class SeverityCounts:
    """Vulnerability counts bucketed by severity label (npm family)."""

    counts: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned: dict[str, int] = {}
        for label, value in self.counts.items():
            # bool is an int subclass but never a count
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                cleaned[label] = value
            else:
                cleaned[label] = 0
        self.counts = cleaned

    def get(self, label: str) -> int:
        return self.counts.get(label, 0)

    def to_data(self) -> dict[str, int]:
        return dict(self.counts)


@dataclass
class AdvisoryList:
    """Raw advisory list as reported by pip-audit or cargo-audit."""

    entries: list[Any] = field(default_factory=list)

    def to_data(self) -> list[Any]:
        return list(self.entries)


VulnerabilityBreakdown = Union[SeverityCounts, AdvisoryList]


@dataclass
class EcosystemReport:
    """Result of one dependency check.

    Filled in by an adapter, finalized with a summary, rendered once.
    """

    manager: str
    path: str = ""
    outdated: list[OutdatedEntry] = field(default_factory=list)
    vulnerable: int = 0
    vulnerabilities: VulnerabilityBreakdown | None = None
    summary: str = ""
    error: str | None = None
    notes: list[str] = field(default_factory=list)

    @property
    def outdated_count(self) -> int:
        return len(self.outdated)

    def to_dict(self) -> dict[str, Any]:
        """Structured output for --json."""
        if self.error is not None:
            return {"error": self.error, "manager": self.manager, "path": self.path}

        data: dict[str, Any] = {
            "manager": self.manager,
            "outdated": [entry.to_dict() for entry in self.outdated],
            "vulnerable": self.vulnerable,
        }
        if self.vulnerabilities is not None:
            data["vulnerabilities"] = self.vulnerabilities.to_data()
        data["summary"] = self.summary
        data["path"] = self.path
        return data
