from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SourceSpec:
    name: str


class IPSource(Protocol):
    def fetch(self) -> str:
        """Return the current public IP address or raise FetchError."""
        ...
