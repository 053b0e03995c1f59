# career_match/matching.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from career_match.config import ScoringConfig
from career_match.models import CandidateProfile, JobPosting, MatchResult, Page
from career_match.scoring import score
from career_match.utils import paginate

logger = logging.getLogger(__name__)


def rank(
    candidate: CandidateProfile,
    jobs: Iterable[JobPosting],
    weights: Optional[ScoringConfig] = None,
) -> List[MatchResult]:
    """
    Score every job and order by descending score.

    Ties keep their input order: `sorted` is stable, and `reverse=True`
    preserves the original order of equal elements.
    """
    results = [MatchResult(job=job, score=score(candidate, job, weights)) for job in jobs or []]
    return sorted(results, key=lambda r: r.score, reverse=True)


def open_jobs(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    return [j for j in jobs or [] if j.is_open]


def _preferred_types(candidate: CandidateProfile, jobs: Sequence[JobPosting]) -> List[JobPosting]:
    if not candidate.job_type_preferences:
        return list(jobs)
    return [j for j in jobs if j.job_type in candidate.job_type_preferences]


def recommend(
    candidate: CandidateProfile,
    jobs: Iterable[JobPosting],
    page: int = 1,
    limit: int = 10,
    weights: Optional[ScoringConfig] = None,
) -> Page:
    """
    Personalized recommendations: open jobs, narrowed to the candidate's
    preferred job types when any are set, ranked and sliced to one page.
    """
    candidates = _preferred_types(candidate, open_jobs(jobs))
    ranked = rank(candidate, candidates, weights)

    meta = paginate(page, limit, len(ranked))
    start = (meta["current_page"] - 1) * meta["per_page"]
    items = ranked[start:start + meta["per_page"]]

    logger.debug(
        "recommend: %d open/preferred jobs, page %d of %d",
        len(ranked), meta["current_page"], meta["total_pages"],
    )
    return Page(items=items, **meta)
