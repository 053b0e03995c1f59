from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional

import yaml
from pydantic import BaseModel, Field, NonNegativeInt


Weight = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class Weights(BaseModel):
    skills: Weight = 40.0
    job_type: Weight = 20.0
    work_mode: Weight = 15.0
    location: Weight = 10.0
    experience: Weight = 15.0


class ExperienceFloors(BaseModel):
    # years of experience a candidate needs for each level; lead has none
    entry: NonNegativeInt = 0
    intermediate: NonNegativeInt = 1
    senior: NonNegativeInt = 3
    lead: Optional[NonNegativeInt] = None


class ScoringConfig(BaseModel):
    weights: Weights = Field(default_factory=Weights)
    experience_floors: ExperienceFloors = Field(default_factory=ExperienceFloors)


class InputFile(BaseModel):
    path: str


class Output(BaseModel):
    dir: str = "data/results"
    top_n: int = 100
    only_open: bool = True


class Logging(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Config(BaseModel):
    version: int = 1
    candidate: InputFile
    jobs: InputFile
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    output: Output = Field(default_factory=Output)
    logging: Logging = Field(default_factory=Logging)


DEFAULT_SCORING = ScoringConfig()


def validate_scoring(scoring: ScoringConfig) -> ScoringConfig:
    total = sum(scoring.weights.model_dump().values())
    if not abs(total - 100.0) < 0.01:
        raise ValueError(f"Scoring weights must sum to 100 (got {total})")
    return scoring


def load_config(path: str) -> Config:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping (dict). Got: {type(raw)}")

    cfg = Config(**raw)
    validate_scoring(cfg.scoring)
    return cfg
