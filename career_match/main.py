# career_match/main.py
from __future__ import annotations

import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from career_match.config import load_config
from career_match.matching import open_jobs, rank
from career_match.models import CandidateProfile
from career_match.records import job_from_record, profile_from_record
from career_match.scoring import calculate_match_score

REPO_ROOT = Path(__file__).resolve().parents[1]

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root = logging.getLogger("career_match")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_candidate(path: Path) -> CandidateProfile:
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Candidate file must hold a JSON object: {path}")
    return profile_from_record(data)


def load_jobs(path: Path) -> List[Dict[str, Any]]:
    data = _load_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Jobs file must hold a JSON list: {path}")
    return [j for j in data if isinstance(j, dict)]


def _write_results(results: List[Dict[str, Any]], out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    out_json = out_dir / "results.json"
    out_csv = out_dir / "results.csv"

    out_json.write_text(json.dumps(results, indent=2), encoding="utf-8")

    fieldnames = [
        "score",
        "id",
        "title",
        "job_type",
        "work_mode",
        "city",
        "experience_level",
        "skills_hit",
        "skills_miss",
    ]

    with out_csv.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            row = dict(r)
            row["skills_hit"] = ", ".join(r.get("skills_hit", []))
            row["skills_miss"] = ", ".join(r.get("skills_miss", []))
            writer.writerow({k: row.get(k, "") for k in fieldnames})

    logger.info("Wrote %d matches -> %s", len(results), out_json)
    logger.info("Wrote CSV -> %s", out_csv)


def run(config_path: str = "config/config.yaml", base_dir: Optional[Path] = None) -> List[Dict[str, Any]]:
    root = Path(base_dir) if base_dir else REPO_ROOT
    config_file = (root / config_path).resolve()

    cfg = load_config(str(config_file))
    configure_logging(cfg.logging.level)
    logger.info("Using config file: %s", config_file)

    candidate = load_candidate((root / cfg.candidate.path).resolve())
    jobs = [job_from_record(doc) for doc in load_jobs((root / cfg.jobs.path).resolve())]
    logger.info("Loaded %d jobs", len(jobs))

    if cfg.output.only_open:
        jobs = open_jobs(jobs)
        logger.info("%d jobs open for applications", len(jobs))

    results: List[Dict[str, Any]] = []
    for match in rank(candidate, jobs, cfg.scoring)[: cfg.output.top_n]:
        job = match.job
        breakdown = calculate_match_score(candidate, job, cfg.scoring)
        results.append(
            {
                "score": match.score,
                "id": job.id,
                "title": job.title,
                "job_type": job.job_type,
                "work_mode": job.work_mode,
                "city": job.city,
                "experience_level": job.experience_level,
                "skills_hit": breakdown.skills_hit,
                "skills_miss": breakdown.skills_miss,
                "components": breakdown.components,
            }
        )

    _write_results(results, (root / cfg.output.dir).resolve())
    return results


if __name__ == "__main__":
    run()
