"""Cargo adapter."""

from __future__ import annotations

import logging
from pathlib import Path

from claw_deps.adapters.base import Adapter
from claw_deps.models import EcosystemReport, OutdatedEntry
from claw_deps.parsing import (
    AuditFindings,
    Parsed,
    parse_cargo_audit,
    parse_cargo_outdated,
    parse_cargo_update,
)
from claw_deps.runner import CommandState

logger = logging.getLogger(__name__)

CARGO_OUTDATED = ("cargo", "outdated", "--format=json")
CARGO_UPDATE_DRY_RUN = ("cargo", "update", "--dry-run")
CARGO_AUDIT = ("cargo", "audit", "--json")


class CargoAdapter(Adapter):
    """cargo-outdated with a ``cargo update --dry-run`` fallback, cargo-audit."""

    family = "cargo"

    def outdated(self, directory: Path, report: EcosystemReport) -> Parsed[list[OutdatedEntry]]:
        output = self.run(CARGO_OUTDATED, directory, report)
        parsed = parse_cargo_outdated(output.stdout)
        # cargo-outdated is a plugin; without it cargo fails with nothing on stdout
        plugin_missing = output.state is not CommandState.OK and not output.stdout.strip()
        if parsed.ok and not plugin_missing:
            return parsed

        logger.debug("Falling back to cargo update --dry-run")
        # cargo prints the "Updating" lines on stderr
        fallback = self.run(CARGO_UPDATE_DRY_RUN, directory, report)
        return parse_cargo_update(fallback.combined)

    def audit(self, directory: Path, report: EcosystemReport) -> Parsed[AuditFindings]:
        return parse_cargo_audit(self.run(CARGO_AUDIT, directory, report).stdout)
