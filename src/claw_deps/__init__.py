"""claw-deps: dependency checker for project directories."""

from claw_deps.detection import detect
from claw_deps.models import EcosystemReport, OutdatedEntry

__version__ = "0.1.0"
__all__ = ["__version__", "detect", "EcosystemReport", "OutdatedEntry"]
