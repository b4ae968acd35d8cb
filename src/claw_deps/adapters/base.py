"""Adapter base class: two queries per ecosystem, each failing independently."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from claw_deps.models import EcosystemReport, OutdatedEntry
from claw_deps.parsing import AuditFindings, Parsed
from claw_deps.runner import DEFAULT_TIMEOUT, CommandOutput, CommandState, run_command

logger = logging.getLogger(__name__)


class Adapter:
    """Checks one ecosystem family for outdated and vulnerable dependencies.

    Subclasses implement ``outdated`` and ``audit``. ``check`` runs them in
    that order; a failure in one never prevents the other.
    """

    family: str = ""
    # "up to date and secure" vs "up to date" for the all-clear summary
    claims_secure: bool = True

    def __init__(self, manager: str, timeout: float = DEFAULT_TIMEOUT):
        self.manager = manager
        self.timeout = timeout

    def run(
        self, command: Sequence[str], directory: Path, report: EcosystemReport
    ) -> CommandOutput:
        """Run a tool command, noting on the report when the tool is missing."""
        output = run_command(command, cwd=directory, timeout=self.timeout)
        note = None
        if not output.available:
            note = f"{command[0]} not installed"
        elif output.state is CommandState.TIMEOUT:
            note = f"{' '.join(command[:2])} timed out"
        if note and note not in report.notes:
            report.notes.append(note)
        return output

    def outdated(self, directory: Path, report: EcosystemReport) -> Parsed[list[OutdatedEntry]]:
        raise NotImplementedError

    def audit(self, directory: Path, report: EcosystemReport) -> Parsed[AuditFindings]:
        raise NotImplementedError

    def check(self, directory: Path | str) -> EcosystemReport:
        """Run both queries and return the (unsummarized) report."""
        directory = Path(directory)
        report = EcosystemReport(manager=self.manager, path=str(directory))

        outdated = self.outdated(directory, report)
        if not outdated.ok:
            logger.info("%s outdated output not usable: %s", self.manager, outdated.error)
        report.outdated = list(outdated.value)

        audit = self.audit(directory, report)
        if not audit.ok:
            logger.info("%s audit output not usable: %s", self.manager, audit.error)
        report.vulnerable = audit.value.total
        report.vulnerabilities = audit.value.breakdown

        return report
