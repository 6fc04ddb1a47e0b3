"""Tests for suite loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from verdict.config import EqualCheck, InRangeCheck, SuiteConfig, load_suite


def _example_suites() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[1]
    examples_dir = repo_root / "examples"
    return sorted(p for p in examples_dir.glob("*.yaml") if p.is_file())


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "suite.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_load_minimal_suite(tmp_yaml):
    path = tmp_yaml("""\
        name: minimal
        cases:
          - name: numbers
            checks:
              - equal:
                  expected: 1
                  actual: 1
    """)
    suite = load_suite(path)
    assert suite.name == "minimal"
    assert len(suite.cases) == 1
    case = suite.cases[0]
    assert case.name == "numbers"
    assert isinstance(case.checks[0], EqualCheck)
    assert case.checks[0].model_dump() == {"equal": {"expected": 1, "actual": 1}}


def test_env_variables_are_expanded(tmp_yaml, monkeypatch):
    monkeypatch.setenv("APP_VERSION", "3.1.0")
    path = tmp_yaml("""\
        name: env
        cases:
          - name: version
            checks:
              - starts_with:
                  string: "${APP_VERSION}"
                  prefix: "3."
    """)
    suite = load_suite(path)
    assert suite.cases[0].checks[0].starts_with.string == "3.1.0"


def test_env_default_used_when_unset(tmp_yaml, monkeypatch):
    monkeypatch.delenv("WORKERS", raising=False)
    path = tmp_yaml("""\
        name: env
        cases:
          - name: workers
            checks:
              - in_range:
                  number: "${WORKERS:-4}"
                  minimum: 1
                  maximum: 8
    """)
    check = load_suite(path).cases[0].checks[0]
    assert isinstance(check, InRangeCheck)
    assert check.in_range.number == 4


def test_missing_env_variables_are_listed_together(tmp_yaml, monkeypatch):
    monkeypatch.delenv("VERDICT_MISSING_ONE", raising=False)
    monkeypatch.delenv("VERDICT_MISSING_TWO", raising=False)
    path = tmp_yaml("""\
        name: env
        cases:
          - name: broken
            checks:
              - equal:
                  expected: "${VERDICT_MISSING_ONE}"
                  actual: "${VERDICT_MISSING_TWO}"
    """)
    with pytest.raises(ValueError) as exc_info:
        load_suite(path)
    message = str(exc_info.value)
    assert "VERDICT_MISSING_ONE" in message
    assert "VERDICT_MISSING_TWO" in message


def test_empty_checks_rejected():
    with pytest.raises(ValidationError, match="checks must not be empty"):
        SuiteConfig(name="s", cases=[{"name": "c", "checks": []}])


def test_empty_cases_rejected():
    with pytest.raises(ValidationError, match="cases must not be empty"):
        SuiteConfig(name="s", cases=[])


def test_duplicate_case_names_rejected():
    case = {"name": "same", "checks": [{"is_true": True}]}
    with pytest.raises(ValidationError, match="Duplicate case name"):
        SuiteConfig(name="s", cases=[case, case])


def test_unknown_check_rejected():
    with pytest.raises(ValidationError):
        SuiteConfig(name="s", cases=[{"name": "c", "checks": [{"bogus": 1}]}])


def test_extra_spec_fields_rejected():
    check = {"equal": {"expected": 1, "actual": 1, "tolerance": 0.1}}
    with pytest.raises(ValidationError):
        SuiteConfig(name="s", cases=[{"name": "c", "checks": [check]}])


def test_range_bounds_must_be_ordered():
    check = {"in_range": {"number": 1, "minimum": 10, "maximum": 1}}
    with pytest.raises(ValidationError, match="greater than maximum"):
        SuiteConfig(name="s", cases=[{"name": "c", "checks": [check]}])


@pytest.mark.parametrize("path", _example_suites(), ids=lambda p: p.name)
def test_example_suites_load(path):
    suite = load_suite(path)
    assert suite.cases
