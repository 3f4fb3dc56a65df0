from __future__ import annotations

from typing import Protocol

from publicip.models import OutputDestination


class OutputSink(Protocol):
    def persist(self, destination: OutputDestination, payload: bytes) -> None:
        """Write ``payload`` to ``destination`` or raise PersistError."""
        ...
