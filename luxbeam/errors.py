from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class LuxbeamError(Exception):
    """Base class for errors raised by the caller-side layers (loading, catalog, config)."""


@dataclass
class FixtureLoadError(LuxbeamError):
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        prefix = f"{self.path}: " if self.path else ""
        return f"{prefix}{self.message}"


@dataclass
class CatalogError(LuxbeamError):
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        prefix = f"{self.path}: " if self.path else ""
        return f"{prefix}{self.message}"


@dataclass
class ConfigError(LuxbeamError):
    message: str
    key: Optional[str] = None

    def __str__(self) -> str:
        if self.key is None:
            return self.message
        return f"{self.key}: {self.message}"
