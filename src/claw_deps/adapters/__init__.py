"""Per-ecosystem adapters and the dispatch from ecosystem to adapter."""

from __future__ import annotations

import logging
from pathlib import Path

from claw_deps.adapters.base import Adapter
from claw_deps.adapters.cargo import CargoAdapter
from claw_deps.adapters.go import GoAdapter
from claw_deps.adapters.npm import NpmAdapter
from claw_deps.adapters.pip import PipAdapter
from claw_deps.models import Ecosystem, EcosystemReport
from claw_deps.runner import DEFAULT_TIMEOUT
from claw_deps.summary import finalize

logger = logging.getLogger(__name__)

FAMILY_ADAPTERS: dict[str, type[Adapter]] = {
    adapter.family: adapter for adapter in (NpmAdapter, PipAdapter, GoAdapter, CargoAdapter)
}

ADAPTERS: dict[str, type[Adapter]] = {
    ecosystem.value: FAMILY_ADAPTERS[ecosystem.family] for ecosystem in Ecosystem
}

UNSUPPORTED_MSG = "Unsupported package manager"


def _manager_name(manager: Ecosystem | str) -> str:
    return manager.value if isinstance(manager, Ecosystem) else str(manager)


def get_adapter(manager: Ecosystem | str, timeout: float = DEFAULT_TIMEOUT) -> Adapter | None:
    """Return the adapter for an ecosystem identifier, or None if unknown."""
    name = _manager_name(manager)
    adapter_class = ADAPTERS.get(name)
    if adapter_class is None:
        return None
    return adapter_class(name, timeout=timeout)


def check_directory(
    directory: Path | str, manager: Ecosystem | str, timeout: float = DEFAULT_TIMEOUT
) -> EcosystemReport:
    """Check a directory with the adapter for ``manager`` and summarize it.

    An unknown identifier yields a report carrying an error rather than
    an exception.
    """
    name = _manager_name(manager)
    adapter = get_adapter(name, timeout=timeout)
    if adapter is None:
        logger.error("No adapter for %s", name)
        return EcosystemReport(manager=name, path=str(directory), error=UNSUPPORTED_MSG)

    report = adapter.check(directory)
    report.path = str(directory)
    return finalize(report, claims_secure=adapter.claims_secure)


__all__ = [
    "ADAPTERS",
    "Adapter",
    "CargoAdapter",
    "GoAdapter",
    "NpmAdapter",
    "PipAdapter",
    "check_directory",
    "get_adapter",
]
