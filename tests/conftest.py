"""
Pytest configuration and shared fixtures.
"""

import pytest

from career_match.models import CandidateProfile, JobPosting


@pytest.fixture
def make_candidate():
    """Factory for candidate profiles; keyword overrides replace the defaults."""
    def _make(**overrides) -> CandidateProfile:
        fields = {
            "skills": {"javascript", "react"},
            "job_type_preferences": {"full-time"},
            "remote_preference": "remote",
            "city": "Dhaka",
            "years_of_relevant_experience": 0,
        }
        fields.update(overrides)
        return CandidateProfile(**fields)
    return _make


@pytest.fixture
def make_job():
    """Factory for job postings; keyword overrides replace the defaults."""
    def _make(**overrides) -> JobPosting:
        fields = {
            "id": "job-1",
            "title": "Frontend Developer",
            "required_skills": ["javascript", "react", "node.js"],
            "job_type": "full-time",
            "work_mode": "remote",
            "city": "Dhaka",
            "experience_level": "entry",
        }
        fields.update(overrides)
        return JobPosting(**fields)
    return _make


@pytest.fixture
def student_record() -> dict:
    """Student profile document as stored by the platform."""
    return {
        "firstName": "Nadia",
        "lastName": "Rahman",
        "location": {"city": "Dhaka", "country": "Bangladesh"},
        "skills": [
            {"name": "JavaScript", "proficiency": "advanced"},
            {"name": "React", "proficiency": "intermediate"},
        ],
        "experience": [
            {"company": "Acme", "position": "Intern"},
            {"company": "Globex", "position": "Developer"},
        ],
        "jobPreferences": {
            "jobTypes": ["full-time", "internship"],
            "remotePreference": "hybrid",
        },
    }


@pytest.fixture
def job_record() -> dict:
    """Job posting document as stored by the platform."""
    return {
        "_id": "65f0c2a1",
        "title": "  Junior Frontend Developer ",
        "jobType": "full-time",
        "workMode": "hybrid",
        "location": {"city": "Dhaka", "remote": False},
        "experienceLevel": "intermediate",
        "requiredSkills": [{"name": "JavaScript", "level": "intermediate"}, {"name": "Node.js"}],
        "status": "active",
        "isPublished": True,
    }
