"""
Fixture catalog.

A catalog is a `fixtures.json` file listing the fixtures a viewer can place,
either as a bare list or as {"fixtures": [...]}. IES paths are resolved
relative to the catalog file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from luxbeam.errors import CatalogError


logger = logging.getLogger(__name__)


def _optional_str(v: Any) -> Optional[str]:
    return None if v is None else str(v)


@dataclass(frozen=True)
class FixtureRecord:
    """A fixture listed in the catalog."""
    name: str = ""
    # None means the key was absent; an empty string is kept as given.
    mode: Optional[str] = None
    output_type: Optional[str] = None
    wattage: Optional[float] = None
    ies_path: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or "Unnamed fixture"

    @property
    def display_mode(self) -> str:
        if self.mode is not None:
            return self.mode
        if self.output_type is not None:
            return self.output_type
        return "—"

    @property
    def search_mode(self) -> str:
        """Mode text matched by filter(); falls back to output type only when mode is absent."""
        if self.mode is not None:
            return self.mode
        return self.output_type or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mode": self.mode,
            "outputType": self.output_type,
            "wattage": self.wattage,
            "iesPath": self.ies_path,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any], base_dir: Optional[Path] = None) -> 'FixtureRecord':
        ies = d.get("iesPath", d.get("ies_path"))
        if ies and base_dir is not None and not Path(ies).is_absolute():
            ies = str((base_dir / ies).resolve())
        wattage = d.get("wattage")
        return FixtureRecord(
            name=str(d.get("name") or ""),
            mode=_optional_str(d.get("mode")),
            output_type=_optional_str(d.get("outputType", d.get("output_type"))),
            wattage=float(wattage) if isinstance(wattage, (int, float)) and not isinstance(wattage, bool) else None,
            ies_path=str(ies) if ies else None,
        )


@dataclass
class FixtureCatalog:
    fixtures: List[FixtureRecord] = field(default_factory=list)
    source: Optional[str] = None

    @classmethod
    def load(cls, path: str | Path) -> 'FixtureCatalog':
        p = Path(path).expanduser().resolve()
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogError("Catalog file not found", path=str(p)) from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON at line {e.lineno}: {e.msg}", path=str(p)) from e
        except UnicodeDecodeError as e:
            raise CatalogError("Catalog file is not UTF-8 text", path=str(p)) from e
        except OSError as e:
            raise CatalogError(f"Failed to read catalog: {e}", path=str(p)) from e
        return cls.from_data(data, base_dir=p.parent, source=str(p))

    @classmethod
    def from_data(cls, data: Any, base_dir: Optional[Path] = None, source: Optional[str] = None) -> 'FixtureCatalog':
        if isinstance(data, list):
            items = data
        elif isinstance(data, dict):
            items = data.get("fixtures") or []
        else:
            raise CatalogError("Catalog must be a list or an object with 'fixtures'", path=source)
        if not isinstance(items, list):
            raise CatalogError("'fixtures' must be a list", path=source)
        records = [FixtureRecord.from_dict(d, base_dir=base_dir) for d in items if isinstance(d, dict)]
        if len(records) != len(items):
            logger.warning("Skipped %d catalog entries that are not objects", len(items) - len(records))
        return cls(fixtures=records, source=source)

    def __len__(self) -> int:
        return len(self.fixtures)

    def filter(self, query: str) -> List[FixtureRecord]:
        normalized = (query or "").strip().lower()
        if not normalized:
            return list(self.fixtures)
        return [
            f for f in self.fixtures
            if normalized in f.name.lower() or normalized in f.search_mode.lower()
        ]

    def find(self, name: str) -> Optional[FixtureRecord]:
        for f in self.fixtures:
            if f.name == name:
                return f
        return None
