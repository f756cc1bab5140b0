from __future__ import annotations

from luxbeam.photometry.profile import LightProfile, derive_light_profile

__all__ = ["LightProfile", "derive_light_profile"]
