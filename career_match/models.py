from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


JobType = Literal["full-time", "part-time", "internship", "freelance", "contract"]
RemotePreference = Literal["remote", "onsite", "hybrid", "flexible"]
WorkMode = Literal["remote", "office", "onsite", "hybrid"]
ExperienceLevel = Literal["entry", "intermediate", "senior", "lead"]
JobStatus = Literal["draft", "pending", "active", "closed", "cancelled"]


def _as_list(v: Any) -> Any:
    # null collections arrive from stored documents; treat them as empty
    if v is None:
        return []
    return v


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class CandidateProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: set[str] = Field(default_factory=set)
    job_type_preferences: set[JobType] = Field(default_factory=set)
    remote_preference: Optional[RemotePreference] = None
    city: Optional[str] = None
    years_of_relevant_experience: int = Field(default=0, ge=0)

    @field_validator("skills", "job_type_preferences", mode="before")
    @classmethod
    def _empty_sets(cls, v):
        return _as_list(v)

    @field_validator("city", "remote_preference", mode="before")
    @classmethod
    def _absent_strings(cls, v):
        return _blank_to_none(v)

    @field_validator("years_of_relevant_experience", mode="before")
    @classmethod
    def _zero_years(cls, v):
        return 0 if v is None else v


class JobPosting(BaseModel):
    model_config = ConfigDict(frozen=True)

    required_skills: List[str] = Field(default_factory=list)
    job_type: JobType
    work_mode: WorkMode = "office"
    city: Optional[str] = None
    experience_level: ExperienceLevel = "entry"

    # listing metadata, not used for scoring
    id: Optional[str] = None
    title: Optional[str] = None
    status: JobStatus = "active"
    is_published: bool = True

    @field_validator("required_skills", mode="before")
    @classmethod
    def _empty_list(cls, v):
        return _as_list(v)

    @field_validator("city", mode="before")
    @classmethod
    def _absent_city(cls, v):
        return _blank_to_none(v)

    @property
    def is_open(self) -> bool:
        return self.status == "active" and self.is_published


class MatchResult(BaseModel):
    job: JobPosting
    score: int = Field(ge=0, le=100)


class Application(BaseModel):
    """
    An application record as created at apply time.
    `match_score` is a snapshot; it is never recomputed after creation.
    """
    model_config = ConfigDict(frozen=True)

    job_id: Optional[str]
    candidate_id: str
    cover_letter: Optional[str] = None
    match_score: int = Field(ge=0, le=100)
    status: Literal["pending"] = "pending"
    applied_at: datetime


class Page(BaseModel):
    items: List[MatchResult]
    current_page: int
    per_page: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
