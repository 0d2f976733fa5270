"""
Conformance: Exit status and unreadable reports
"""
import pytest

from tests.conformance.runner import check_case
from tests.conformance.sample import jstat_output


# Each test case is a tuple: (description, jstat_output, exit_code, expected_outcome)

CASES = [
    ("success", jstat_output(), 0, "valid"),
    ("failure_consistent_numbers", jstat_output(), 1, "error: Unexpected exit code: 1"),
    ("failure_inconsistent_numbers", jstat_output(OC="1.0"), 1, "error: Unexpected exit code: 1"),
    ("missing_column", "NGCMN NGCMX\n41984.0 671744.0\n", 0, "error: Field NGC: not present"),
    ("unsampled_value", jstat_output(OC="-"), 0, "error: Field OC: non-numeric value '-'"),
    ("no_output", "", 0, "error: Missing header line"),
    ("ragged_row", "NGCMN NGCMX NGC\n41984.0 671744.0\n", 0, "error: missing value for column NGC"),
]


@pytest.mark.parametrize(
    "description,output,exit_code,expected", CASES, ids=[c[0] for c in CASES]
)
def test_exit_status(runner, description, output, exit_code, expected):
    """A non-zero exit status is reported before any numbers are looked at."""
    check_case(runner, output, expected, exit_code=exit_code)
