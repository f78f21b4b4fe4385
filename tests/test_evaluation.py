import os
import sys
from datetime import datetime
from pathlib import Path

# Add the evaluation directory to path
EVALUATION_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'evaluation'))
if EVALUATION_DIR not in sys.path:
	sys.path.insert(0, EVALUATION_DIR)

import evaluation


SAMPLE_OUTPUT = """
============================= test session starts ==============================
collected 4 items

tests/test_core.py::test_count_frequencies PASSED                        [ 25%]
tests/test_core.py::test_single_symbol_tree FAILED                       [ 50%]
tests/test_heap.py::test_extract_from_empty_returns_none SKIPPED (why)   [ 75%]
tests/test_cli.py::test_mode_is_required ERROR                           [100%]

=========================== short test summary info ============================
"""


def test_parse_pytest_verbose_output():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	assert [t["outcome"] for t in tests] == ["passed", "failed", "skipped", "error"]
	assert tests[0]["nodeid"] == "tests/test_core.py::test_count_frequencies"
	assert tests[0]["name"] == "test_count_frequencies"


def test_summarize():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	assert evaluation.summarize(tests) == {
		"total": 4,
		"passed": 1,
		"failed": 1,
		"errors": 1,
		"skipped": 1,
	}


def test_generate_output_path(tmp_path):
	path = evaluation.generate_output_path(tmp_path, datetime(2024, 5, 6, 7, 8, 9))
	assert path == Path(tmp_path) / "evaluation" / "2024-05-06" / "07-08-09" / "report.json"


def test_run_id_is_short_hex():
	run_id = evaluation.generate_run_id()
	assert len(run_id) == 8
	int(run_id, 16)
