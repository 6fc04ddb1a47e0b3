from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Failure, JUnitXml, TestCase, TestSuite

if TYPE_CHECKING:
    from verdict.runner import SuiteResult


def write_junit(output_dir: Path, suite_result: SuiteResult) -> Path:
    """Write junit.xml for a suite run, return its path.

    Each case becomes a test suite and each check a test case; checks are
    named ``{index}:{check}`` so repeated check kinds stay distinct.
    """
    xml = JUnitXml(suite_result.name)

    for case_result in suite_result.cases:
        suite = TestSuite(case_result.name)
        for index, check in enumerate(case_result.results):
            case = TestCase(f"{index}:{check.name}")
            case.classname = case_result.name
            if not check.passed:
                case.result = [Failure(check.message)]
            suite.add_testcase(case)

        suite.add_property("suite_pass_rate", str(suite_result.pass_rate))
        # Use append (not +=) to preserve properties
        xml.append(suite)

    junit_path = output_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path
