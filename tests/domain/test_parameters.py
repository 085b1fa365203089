from __future__ import annotations

import pytest

from lib_gh_commands.domain.errors import DuplicateParameterError
from lib_gh_commands.domain.parameters import LoggerParameters


def test_parse_reads_pairs_case_insensitively() -> None:
    params = LoggerParameters.parse("Verbosity=Detailed|SolutionDir=/repo/")
    assert params["verbosity"] == "Detailed"
    assert params["VERBOSITY"] == "Detailed"
    assert params["SolutionDir"] == "/repo/"
    assert len(params) == 2


@pytest.mark.parametrize("text", [None, ""])
def test_parse_empty_input_yields_empty_table(text: str | None) -> None:
    params = LoggerParameters.parse(text)
    assert len(params) == 0
    assert params["Verbosity"] == ""


def test_missing_key_reads_as_empty_string() -> None:
    params = LoggerParameters.parse("a=1")
    assert params["b"] == ""
    assert params.get("b") is None
    assert "b" not in params
    assert "A" in params


def test_value_keeps_additional_equal_signs() -> None:
    params = LoggerParameters.parse("define=A=1;B=2")
    assert params["define"] == "A=1;B=2"


def test_keys_and_values_are_trimmed() -> None:
    params = LoggerParameters.parse("  Verbosity =  Minimal  | SolutionDir= C:\\src ")
    assert params["Verbosity"] == "Minimal"
    assert params["solutiondir"] == "C:\\src"
    assert list(params) == ["Verbosity", "SolutionDir"]


def test_pairs_without_delimiter_are_skipped() -> None:
    params = LoggerParameters.parse("flag|Verbosity=Quiet||")
    assert params.to_dict() == {"Verbosity": "Quiet"}


def test_empty_value_is_kept() -> None:
    params = LoggerParameters.parse("SolutionDir=")
    assert "SolutionDir" in params
    assert params["SolutionDir"] == ""


def test_duplicate_keys_fail_loudly() -> None:
    with pytest.raises(DuplicateParameterError) as excinfo:
        LoggerParameters.parse("Verbosity=Quiet|verbosity=Detailed")
    assert excinfo.value.key == "verbosity"


def test_constructor_rejects_case_insensitive_duplicates() -> None:
    with pytest.raises(DuplicateParameterError):
        LoggerParameters({"Key": "1", "KEY": "2"})


def test_exact_duplicate_keys_fail_loudly() -> None:
    with pytest.raises(DuplicateParameterError) as excinfo:
        LoggerParameters.parse("SolutionDir=/a| SolutionDir =/b")
    assert excinfo.value.key == "SolutionDir"


def test_constructor_accepts_ordered_pairs() -> None:
    params = LoggerParameters([("Verbosity", "Quiet"), ("SolutionDir", "/repo")])
    assert list(params) == ["Verbosity", "SolutionDir"]
    with pytest.raises(DuplicateParameterError):
        LoggerParameters([("a", "1"), ("a", "2")])
