from __future__ import annotations

from luxbeam.io.fixture_loader import LoadedFixture, build_light, load_fixture

__all__ = ["LoadedFixture", "build_light", "load_fixture"]
