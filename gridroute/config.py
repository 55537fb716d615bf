# gridroute/config.py
from __future__ import annotations
from typing import Any, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import Algorithm

class PlannerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    algorithm: str = Field("astar", description="bfs, ucs, astar or astar-replan")
    replan_fraction: float = Field(2 / 3, ge=0.0, le=1.0, description="where along the initial route the obstacle appears")
    closed_set: bool = False

    cell_size: int = Field(24, gt=0, description="PNG pixels per cell")
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        return Algorithm.parse(v).value

    def merged(self, **overrides: Any) -> "PlannerConfig":
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return PlannerConfig.model_validate(values)

def load_config(path: Optional[str]) -> PlannerConfig:
    """
    Read a YAML mapping of PlannerConfig fields; no path means defaults.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: malformed YAML or a field that fails validation
    """
    if not path:
        return PlannerConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: malformed YAML: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    # pydantic's ValidationError is a ValueError
    cfg = PlannerConfig.model_validate(raw)
    logger.debug("loaded config from {}: {}", path, cfg)
    return cfg
