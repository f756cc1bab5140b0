"""
Viewer configuration.

Plain frozen dataclasses with defaults that match the stock viewer; a JSON
file can override any subset of them. Unknown keys are ignored so older
config files keep loading.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Type, TypeVar

from luxbeam.errors import ConfigError
from luxbeam.models.light import LightPose, VolumetricParams


T = TypeVar("T")


@dataclass(frozen=True)
class LightDefaults:
    angle_rad: float = math.radians(38.0)
    distance: float = 35.0
    penumbra: float = 0.35
    photometric_penumbra: float = 0.4
    decay: float = 2.0


@dataclass(frozen=True)
class HeatmapSettings:
    enabled: bool = False
    reference_lux: float = 150.0
    max_distance: float = 40.0
    size: float = 25.0
    resolution: int = 64
    height: float = 0.012

    def for_light(self, light: LightPose, light_distance: float) -> 'HeatmapSettings':
        """Settings tracking a light: reach at least 15 units, reference white from intensity."""
        return replace(
            self,
            max_distance=max(float(light_distance), 15.0),
            reference_lux=max(float(light.intensity) / 12.0, 60.0),
        )


@dataclass(frozen=True)
class ViewerConfig:
    light_defaults: LightDefaults = field(default_factory=LightDefaults)
    heatmap: HeatmapSettings = field(default_factory=HeatmapSettings)
    volumetric: VolumetricParams = field(default_factory=VolumetricParams)
    ceiling_height: float = 3.25
    default_intensity: float = 1500.0
    default_cct: float = 3500.0


def _section_from_dict(cls: Type[T], data: Any, key: str) -> T:
    if not isinstance(data, Mapping):
        raise ConfigError("expected an object", key=key)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        if f.name not in data:
            continue
        v = data[f.name]
        if isinstance(v, bool) != (f.type in ("bool", bool)):
            raise ConfigError(f"invalid value {v!r}", key=f"{key}.{f.name}")
        if not isinstance(v, (int, float)):
            raise ConfigError(f"expected a number, got {v!r}", key=f"{key}.{f.name}")
        if f.type in ("int", int):
            v = int(v)
        elif f.type in ("float", float):
            v = float(v)
        kwargs[f.name] = v
    return cls(**kwargs)


def config_from_dict(data: Mapping[str, Any]) -> ViewerConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("config root must be an object")
    cfg = ViewerConfig()
    updates: Dict[str, Any] = {}
    if "light_defaults" in data:
        ld = dict(data["light_defaults"]) if isinstance(data["light_defaults"], Mapping) else data["light_defaults"]
        if isinstance(ld, dict) and "angle_deg" in ld:
            deg = ld.pop("angle_deg")
            if isinstance(deg, bool) or not isinstance(deg, (int, float)):
                raise ConfigError(f"expected a number, got {deg!r}", key="light_defaults.angle_deg")
            ld.setdefault("angle_rad", math.radians(float(deg)))
        updates["light_defaults"] = _section_from_dict(LightDefaults, ld, "light_defaults")
    if "heatmap" in data:
        updates["heatmap"] = _section_from_dict(HeatmapSettings, data["heatmap"], "heatmap")
    if "volumetric" in data:
        updates["volumetric"] = _section_from_dict(VolumetricParams, data["volumetric"], "volumetric")
    for key in ("ceiling_height", "default_intensity", "default_cct"):
        if key in data:
            v = data[key]
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ConfigError(f"expected a number, got {v!r}", key=key)
            updates[key] = float(v)
    return replace(cfg, **updates)


def load_config(path: str | Path) -> ViewerConfig:
    p = Path(path).expanduser().resolve()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"config file not found: {p}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON at line {e.lineno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"config file is not UTF-8 text: {p}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config file {p}: {e}") from e
    return config_from_dict(data)
