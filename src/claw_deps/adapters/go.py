"""Go modules adapter."""

from __future__ import annotations

from pathlib import Path

from claw_deps.adapters.base import Adapter
from claw_deps.models import EcosystemReport, OutdatedEntry
from claw_deps.parsing import NO_FINDINGS, AuditFindings, Parsed, parse_go_list

GO_LIST_UPDATES = ("go", "list", "-m", "-u", "all")


class GoAdapter(Adapter):
    """go list for module updates. Go has no integrated audit."""

    family = "go"
    claims_secure = False

    def outdated(self, directory: Path, report: EcosystemReport) -> Parsed[list[OutdatedEntry]]:
        return parse_go_list(self.run(GO_LIST_UPDATES, directory, report).stdout)

    def audit(self, directory: Path, report: EcosystemReport) -> Parsed[AuditFindings]:
        return Parsed(NO_FINDINGS)
