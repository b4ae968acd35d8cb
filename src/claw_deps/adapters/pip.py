"""pip-family adapter (pip, pipenv, poetry)."""

from __future__ import annotations

from pathlib import Path

from claw_deps.adapters.base import Adapter
from claw_deps.models import EcosystemReport, OutdatedEntry
from claw_deps.parsing import AuditFindings, Parsed, parse_pip_audit, parse_pip_outdated

PIP_OUTDATED = ("pip", "list", "--outdated", "--format=json")
PIP_AUDIT = ("pip-audit", "--format=json")


class PipAdapter(Adapter):
    """pip for outdated packages, pip-audit (when installed) for advisories."""

    family = "pip"
    claims_secure = False

    def outdated(self, directory: Path, report: EcosystemReport) -> Parsed[list[OutdatedEntry]]:
        return parse_pip_outdated(self.run(PIP_OUTDATED, directory, report).stdout)

    def audit(self, directory: Path, report: EcosystemReport) -> Parsed[AuditFindings]:
        return parse_pip_audit(self.run(PIP_AUDIT, directory, report).stdout)
