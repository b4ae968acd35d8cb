"""Ecosystem detection by marker file presence."""

from __future__ import annotations

import logging
from pathlib import Path

from claw_deps.models import Ecosystem

logger = logging.getLogger(__name__)

# Checked in order, first hit wins. package.json comes last so that a
# lockfile from another Node manager takes precedence.
MARKER_FILES: tuple[tuple[str, Ecosystem], ...] = (
    ("package-lock.json", Ecosystem.NPM),
    ("yarn.lock", Ecosystem.YARN),
    ("pnpm-lock.yaml", Ecosystem.PNPM),
    ("bun.lockb", Ecosystem.BUN),
    ("requirements.txt", Ecosystem.PIP),
    ("Pipfile", Ecosystem.PIPENV),
    ("pyproject.toml", Ecosystem.POETRY),
    ("go.mod", Ecosystem.GO),
    ("Cargo.toml", Ecosystem.CARGO),
    ("package.json", Ecosystem.NPM),
)


def detect(directory: Path | str) -> Ecosystem | None:
    """Return the ecosystem used in a directory, or None if none is recognized.

    Only file existence is checked; contents are never read.
    """
    root = Path(directory)
    for marker, ecosystem in MARKER_FILES:
        if (root / marker).exists():
            logger.debug("Found %s in %s -> %s", marker, root, ecosystem.value)
            return ecosystem

    logger.debug("No marker file found in %s", root)
    return None
