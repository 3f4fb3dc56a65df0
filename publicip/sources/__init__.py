from __future__ import annotations

from typing import Callable, Dict

from .base import IPSource, SourceSpec
from .ipify import IpifySource
from publicip.config import Settings
from publicip.errors import SettingsError

SOURCES: Dict[str, Callable[[Settings], IPSource]] = {
    IpifySource.spec.name: lambda settings: IpifySource(endpoint=settings.endpoint, timeout=settings.timeout),
}


def build_source(settings: Settings, name: str | None = None) -> IPSource:
    name = name or settings.source
    factory = SOURCES.get(name)
    if factory is None:
        raise SettingsError(f"Unknown IP source {name!r}; choose from {', '.join(sorted(SOURCES))}.")
    return factory(settings)


__all__ = ["IPSource", "SourceSpec", "IpifySource", "SOURCES", "build_source"]
