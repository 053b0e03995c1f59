# career_match/records.py
"""
Projections of stored platform documents (student profiles, job postings)
into scorer inputs. Documents use the platform's camelCase field names.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from career_match.models import CandidateProfile, JobPosting


def _safe_str(x: Any) -> str:
    return x.strip() if isinstance(x, str) else ""


def _mapping(x: Any) -> Dict[str, Any]:
    return x if isinstance(x, dict) else {}


def _skill_names(entries: Any) -> List[str]:
    names = []
    for e in entries or []:
        # skills are stored as {"name": ..., "level": ...}; plain strings also accepted
        name = _safe_str(e.get("name")) if isinstance(e, dict) else _safe_str(e)
        if name:
            names.append(name)
    return names


def _city(doc: Dict[str, Any]) -> Optional[str]:
    return _safe_str(_mapping(doc.get("location")).get("city")) or None


# stored schema defaults for fields a document may omit
PROFILE_DEFAULTS = {"remotePreference": "flexible"}
JOB_DEFAULTS = {"status": "pending", "isPublished": False}


def profile_from_record(doc: Dict[str, Any]) -> CandidateProfile:
    prefs = _mapping(doc.get("jobPreferences"))
    remote = _safe_str(prefs.get("remotePreference")) or PROFILE_DEFAULTS["remotePreference"]
    return CandidateProfile(
        skills=_skill_names(doc.get("skills")),
        job_type_preferences=prefs.get("jobTypes") or [],
        remote_preference=remote,
        city=_city(doc),
        years_of_relevant_experience=len(doc.get("experience") or []),
    )


def job_from_record(doc: Dict[str, Any]) -> JobPosting:
    job_id = doc.get("_id", doc.get("id"))
    fields: Dict[str, Any] = {
        "required_skills": _skill_names(doc.get("requiredSkills")),
        "job_type": doc.get("jobType"),
        "city": _city(doc),
        "id": str(job_id) if job_id is not None else None,
        "title": _safe_str(doc.get("title")) or None,
        "status": doc.get("status") or JOB_DEFAULTS["status"],
        "is_published": JOB_DEFAULTS["isPublished"] if doc.get("isPublished") is None else doc["isPublished"],
    }
    # unset work mode and level fall back to the model defaults (same as the stored schema)
    for src, dst in (("workMode", "work_mode"), ("experienceLevel", "experience_level")):
        if doc.get(src) is not None:
            fields[dst] = doc[src]
    return JobPosting(**fields)
