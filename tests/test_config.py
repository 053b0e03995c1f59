import pytest
from pydantic import ValidationError

from career_match.config import ExperienceFloors, ScoringConfig, Weights, load_config, validate_scoring


def _write(tmp_path, text):
    p = tmp_path / "config.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_minimal_config_uses_defaults(tmp_path):
    p = _write(tmp_path, "candidate:\n  path: c.json\njobs:\n  path: j.json\n")

    cfg = load_config(str(p))

    assert cfg.candidate.path == "c.json"
    assert cfg.scoring.weights.skills == 40
    assert cfg.scoring.weights.experience == 15
    assert cfg.scoring.experience_floors.senior == 3
    assert cfg.scoring.experience_floors.lead is None
    assert cfg.output.only_open is True
    assert cfg.logging.level == "INFO"


def test_weights_must_sum_to_100(tmp_path):
    p = _write(
        tmp_path,
        "candidate: {path: c.json}\n"
        "jobs: {path: j.json}\n"
        "scoring:\n"
        "  weights: {skills: 30, job_type: 20, work_mode: 15, location: 10, experience: 15}\n",
    )
    with pytest.raises(ValueError, match="sum to 100"):
        load_config(str(p))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_config_must_be_mapping(tmp_path):
    p = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(p))


@pytest.mark.parametrize("bad", [".nan", ".inf", "-10"])
def test_weights_must_be_finite_and_non_negative(tmp_path, bad):
    p = _write(
        tmp_path,
        "candidate: {path: c.json}\n"
        "jobs: {path: j.json}\n"
        "scoring:\n"
        f"  weights: {{skills: {bad}}}\n",
    )
    with pytest.raises(ValueError):
        load_config(str(p))


def test_nan_total_fails_sum_check():
    scoring = ScoringConfig.model_construct(
        weights=Weights.model_construct(skills=float("nan"), job_type=20, work_mode=15, location=10, experience=15),
        experience_floors=ExperienceFloors(),
    )
    with pytest.raises(ValueError, match="sum to 100"):
        validate_scoring(scoring)


def test_unknown_log_level_is_rejected(tmp_path):
    p = _write(tmp_path, "candidate: {path: c.json}\njobs: {path: j.json}\nlogging: {level: LOUD}\n")
    with pytest.raises(ValidationError):
        load_config(str(p))
