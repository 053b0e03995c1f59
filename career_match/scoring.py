# career_match/scoring.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from career_match.config import DEFAULT_SCORING, ScoringConfig
from career_match.models import CandidateProfile, JobPosting
from career_match.utils import clamp, normalize_key, round_half_up, unique_lower

logger = logging.getLogger(__name__)


@dataclass
class ScoreBreakdown:
    score: int
    raw_total: float
    skills_hit: List[str]
    skills_miss: List[str]
    components: Dict[str, float]


def _skill_overlap(candidate: CandidateProfile, job: JobPosting) -> Tuple[float, List[str], List[str]]:
    required = unique_lower(job.required_skills)
    held = set(unique_lower(candidate.skills))

    hits = [s for s in required if s in held]
    misses = [s for s in required if s not in held]

    if not required or not held:
        return 0.0, hits, misses
    return len(hits) / len(required), hits, misses


def _job_type_matches(candidate: CandidateProfile, job: JobPosting) -> bool:
    return job.job_type in candidate.job_type_preferences


def _work_mode_matches(candidate: CandidateProfile, job: JobPosting) -> bool:
    pref = candidate.remote_preference
    if pref == "flexible":
        return True
    if pref == "remote" and job.work_mode == "remote":
        return True
    if pref == "hybrid" and job.work_mode == "hybrid":
        return True
    return False


def _location_matches(candidate: CandidateProfile, job: JobPosting) -> bool:
    mine = normalize_key(candidate.city)
    theirs = normalize_key(job.city)
    return bool(mine) and bool(theirs) and mine == theirs


def _experience_matches(candidate: CandidateProfile, job: JobPosting, scoring: ScoringConfig) -> bool:
    floor = getattr(scoring.experience_floors, job.experience_level, None)
    if floor is None:
        # no floor defined (lead by default): never matched
        return False
    return candidate.years_of_relevant_experience >= floor


def calculate_match_score(
    candidate: CandidateProfile,
    job: JobPosting,
    weights: Optional[ScoringConfig] = None,
) -> ScoreBreakdown:
    """
    Returns an explainable 0-100 score and which required skills matched/missed.

    Each dimension contributes its full weight or nothing, except skills which
    contributes in proportion to the share of required skills the candidate holds.
    """
    scoring = weights or DEFAULT_SCORING
    w = scoring.weights

    skill_ratio, hits, misses = _skill_overlap(candidate, job)

    components = {
        "skills": skill_ratio * w.skills,
        "job_type": w.job_type if _job_type_matches(candidate, job) else 0.0,
        "work_mode": w.work_mode if _work_mode_matches(candidate, job) else 0.0,
        "location": w.location if _location_matches(candidate, job) else 0.0,
        "experience": w.experience if _experience_matches(candidate, job, scoring) else 0.0,
    }

    raw_total = sum(components.values())
    score = clamp(round_half_up(raw_total))

    logger.debug("scored job=%s score=%d components=%s", job.id or job.title, score, components)

    return ScoreBreakdown(
        score=score,
        raw_total=round(raw_total, 4),
        skills_hit=hits,
        skills_miss=misses,
        components={k: round(v, 4) for k, v in components.items()},
    )


def score(candidate: CandidateProfile, job: JobPosting, weights: Optional[ScoringConfig] = None) -> int:
    """Compatibility score between a candidate and a job, an integer in [0, 100]."""
    return calculate_match_score(candidate, job, weights).score
