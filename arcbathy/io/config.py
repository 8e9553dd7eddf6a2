from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BathyConfig:
    bath_path: str
    earth_radius: float     # meters, 0 keeps depths surface-relative
    method: str = "linear"
    missing: str = "nan"
    edge_limit: bool = True


def load_config(path: str | Path) -> BathyConfig:
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    return BathyConfig(bath_path=data["bath_path"],
                       earth_radius=float(data["earth_radius"]),
                       method=data.get("method", "linear"),
                       missing=data.get("missing", "nan"),
                       edge_limit=bool(data.get("edge_limit", True)))
