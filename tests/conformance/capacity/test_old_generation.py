"""
Conformance: Old generation bounds and old space identity
Relations: OGCMX >= OGCMN, OGCMN <= OGC <= OGCMX, OC == OGC (no tolerance)
"""
import pytest

from tests.conformance.runner import check_case
from tests.conformance.sample import PARALLEL, SERIAL, jstat_output


# Each test case is a tuple: (description, jstat_output, collectors, expected_outcome)

CASES = [
    ("sample", jstat_output(), SERIAL, "valid"),
    ("min_above_max", jstat_output(OGCMN="2000000.0"), SERIAL, "error: OGCMN > OGCMX"),
    ("below_min", jstat_output(OGCMN="90000.0"), SERIAL, "error: OGC < OGCMN"),
    ("above_max", jstat_output(OGCMN="70000.0", OGCMX="80000.0"), SERIAL, "error: OGC > OGCMX"),
    ("space_differs", jstat_output(OC="80000.0"), SERIAL, "error: OC=80000.0, OGC=83968.0"),
    ("space_differs_parallel", jstat_output(OC="80000.0"), PARALLEL, "error: OC != OGC"),
    ("space_differs_slightly", jstat_output(OC="83968.0001"), SERIAL, "error: OC != OGC"),
    ("space_differs_slightly_parallel", jstat_output(OC="83967.9999"), PARALLEL, "error: OC != OGC"),
]


@pytest.mark.parametrize(
    "description,output,collectors,expected", CASES, ids=[c[0] for c in CASES]
)
def test_old_generation(runner, description, output, collectors, expected):
    """Old space is made up only from one old generation."""
    check_case(runner, output, expected, collectors=collectors)
