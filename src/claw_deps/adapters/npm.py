"""npm-family adapter (npm, yarn, pnpm, bun)."""

from __future__ import annotations

from pathlib import Path

from claw_deps.adapters.base import Adapter
from claw_deps.models import EcosystemReport, OutdatedEntry
from claw_deps.parsing import AuditFindings, Parsed, parse_npm_audit, parse_npm_outdated

NPM_OUTDATED = ("npm", "outdated", "--json")
NPM_AUDIT = ("npm", "audit", "--json")


class NpmAdapter(Adapter):
    """Queries run through npm for every Node package manager."""

    family = "npm"

    def outdated(self, directory: Path, report: EcosystemReport) -> Parsed[list[OutdatedEntry]]:
        # npm outdated exits 1 whenever something is outdated
        return parse_npm_outdated(self.run(NPM_OUTDATED, directory, report).stdout)

    def audit(self, directory: Path, report: EcosystemReport) -> Parsed[AuditFindings]:
        return parse_npm_audit(self.run(NPM_AUDIT, directory, report).stdout)
