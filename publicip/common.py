from __future__ import annotations

import os
from pathlib import Path


def ensure_dirs(*paths: str | Path) -> None:
    for p in paths:
        Path(p).mkdir(parents=True, exist_ok=True)


def write_bytes(path: Path, payload: bytes, mode: int) -> None:
    # mode only applies when the file is created, like open(2).
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(payload)


def getenv(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)
