from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputDestination:
    path: str
    mode: int = 0o644

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Output destination path must not be empty.")
