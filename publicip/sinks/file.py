from __future__ import annotations

import logging
from pathlib import Path

from publicip.common import ensure_dirs, write_bytes
from publicip.errors import PersistError
from publicip.models import OutputDestination

logger = logging.getLogger(__name__)


class FileSink:
    """Writes the payload to a path on the local filesystem."""

    def __init__(self, create_parents: bool = True) -> None:
        self.create_parents = create_parents

    def persist(self, destination: OutputDestination, payload: bytes) -> None:
        path = Path(destination.path)
        try:
            if self.create_parents:
                ensure_dirs(path.parent)
            write_bytes(path, payload, destination.mode)
        except OSError as exc:
            raise PersistError(f"Could not write {path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s (mode %o)", len(payload), path, destination.mode)
