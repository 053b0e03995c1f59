# career_match/applications.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from career_match.config import ScoringConfig
from career_match.models import Application, CandidateProfile, JobPosting
from career_match.scoring import score

logger = logging.getLogger(__name__)


class ApplicationError(ValueError):
    """Raised when an application cannot be created."""


class JobNotAcceptingApplications(ApplicationError):
    pass


class DuplicateApplication(ApplicationError):
    pass


def apply_to_job(
    candidate: CandidateProfile,
    job: JobPosting,
    candidate_id: str,
    existing: Iterable[Application] = (),
    cover_letter: Optional[str] = None,
    now: Optional[datetime] = None,
    weights: Optional[ScoringConfig] = None,
) -> Application:
    """
    Create an application with the match score frozen at apply time.

    Later changes to the candidate's profile do not touch the stored score;
    callers persist the returned record as-is.
    """
    if job.status != "active":
        raise JobNotAcceptingApplications(f"Job {job.id or job.title!r} is not accepting applications (status={job.status})")

    for app in existing:
        if app.job_id == job.id and app.candidate_id == candidate_id:
            raise DuplicateApplication(f"Candidate {candidate_id} has already applied to job {job.id}")

    application = Application(
        job_id=job.id,
        candidate_id=candidate_id,
        cover_letter=cover_letter,
        match_score=score(candidate, job, weights),
        applied_at=now or datetime.now(timezone.utc),
    )
    logger.info("application created: job=%s candidate=%s score=%d", job.id, candidate_id, application.match_score)
    return application
