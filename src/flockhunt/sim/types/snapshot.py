from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: Optional[TickMetrics]
    agents: List[Dict[str, Any]]
    scores: Dict[int, int]
    focused_id: Optional[int]
    metadata: "SnapshotMetadata"


@dataclass(slots=True)
class SnapshotMetadata:
    map_size: float
    sim_dt: float
    tick_rate: float
    seed: int
    config_version: str
