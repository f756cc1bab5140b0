from __future__ import annotations

from luxbeam.database.catalog import FixtureCatalog, FixtureRecord

__all__ = ["FixtureCatalog", "FixtureRecord"]
