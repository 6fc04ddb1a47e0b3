from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from verdict.assertions.base import CheckResult
from verdict.assertions.declarative import evaluate_check
from verdict.config import CaseConfig, SuiteConfig
from verdict.reporting.junit import write_junit
from verdict.verbose import LogLevel, setup_run_logging


@dataclass
class CaseResult:
    name: str
    results: list[CheckResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "all_passed": self.all_passed}


@dataclass
class SuiteResult:
    name: str
    cases: list[CaseResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(c.all_passed for c in self.cases)

    @property
    def pass_rate(self) -> float:
        """Percentage of individual checks that passed."""
        results = [r for c in self.cases for r in c.results]
        if not results:
            return 0.0
        return 100.0 * sum(r.passed for r in results) / len(results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "cases": [c.to_dict() for c in self.cases],
            "all_passed": self.all_passed,
            "pass_rate": self.pass_rate,
        }


class SuiteRunner:
    """Evaluates every case of a check suite and writes junit.xml and summary.json."""

    def __init__(
        self,
        suite: SuiteConfig,
        output_dir: Path,
        verbose: bool = False,
        check_level: LogLevel = LogLevel.DEBUG,
    ):
        self.suite = suite
        self.output_dir = output_dir
        self.verbose = verbose
        self.check_level = check_level

    def execute(self) -> SuiteResult:
        logger = setup_run_logging(
            self.output_dir, check_level=self.check_level, verbose=self.verbose
        )
        logger.info(f"Starting suite '{self.suite.name}' ({len(self.suite.cases)} case(s))")

        suite_result = SuiteResult(name=self.suite.name)
        for case in self.suite.cases:
            suite_result.cases.append(self._run_case(case, logger))

        junit_path = write_junit(self.output_dir, suite_result)
        summary_path = self.output_dir / "summary.json"
        summary_path.write_text(json.dumps(suite_result.to_dict(), indent=2) + "\n")
        logger.info(f"Wrote {junit_path} and {summary_path}, pass rate {suite_result.pass_rate:.1f}%")
        return suite_result

    def _run_case(self, case: CaseConfig, logger: logging.Logger) -> CaseResult:
        logger.info(f"Running case '{case.name}'")
        result = CaseResult(name=case.name)
        for check in case.checks:
            result.results.append(evaluate_check(check, logger=logger))
        return result
