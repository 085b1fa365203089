from __future__ import annotations

import logging
import os

import pytest

from lib_gh_commands.adapters.build_events import BuildEventHub
from lib_gh_commands.adapters.build_logger import GitHubBuildLogger, relative_to_root
from lib_gh_commands.application.use_cases.issue_command import CommandIssuer
from lib_gh_commands.domain.build_events import BuildErrorEvent, BuildMessageEvent, BuildWarningEvent
from lib_gh_commands.domain.errors import DuplicateParameterError, InvalidArgumentError
from lib_gh_commands.domain.verbosity import LoggerVerbosity, MessageImportance


def _logger(issuer: CommandIssuer, parameters: str | None = None, **kwargs) -> tuple[GitHubBuildLogger, BuildEventHub]:
    hub = BuildEventHub()
    build_logger = GitHubBuildLogger(issuer, parameters=parameters, **kwargs)
    build_logger.initialize(hub)
    return build_logger, hub


def test_initialize_applies_parameters(issuer: CommandIssuer) -> None:
    build_logger, _ = _logger(issuer, "verbosity=Detailed|SolutionDir=/repo")
    assert build_logger.is_initialized
    assert build_logger.verbosity is LoggerVerbosity.DETAILED
    assert build_logger.solution_dir == "/repo" + os.sep
    assert build_logger.errors_as_warnings is False


def test_initialize_defaults_without_parameters(issuer: CommandIssuer) -> None:
    build_logger, _ = _logger(issuer)
    assert build_logger.verbosity is LoggerVerbosity.NORMAL
    assert build_logger.solution_dir is None


def test_relative_solution_dir_is_resolved_against_cwd(issuer: CommandIssuer) -> None:
    build_logger, _ = _logger(issuer, "SolutionDir=src/..", cwd="/work/repo")
    assert build_logger.solution_dir == "/work/repo" + os.sep


def test_unparsable_verbosity_keeps_current_value(issuer: CommandIssuer, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_gh_commands.adapters.build_logger")
    build_logger, _ = _logger(issuer, "Verbosity=chatty", verbosity=LoggerVerbosity.MINIMAL)
    assert build_logger.verbosity is LoggerVerbosity.MINIMAL
    assert "chatty" in caplog.text


def test_initialize_rejects_missing_event_source(issuer: CommandIssuer) -> None:
    with pytest.raises(InvalidArgumentError):
        GitHubBuildLogger(issuer).initialize(None)


def test_initialize_rejects_duplicate_parameters(issuer: CommandIssuer) -> None:
    with pytest.raises(DuplicateParameterError):
        GitHubBuildLogger(issuer, parameters="Verbosity=Quiet|VERBOSITY=Minimal").initialize(BuildEventHub())


def test_initialize_twice_is_rejected(issuer: CommandIssuer) -> None:
    build_logger, hub = _logger(issuer)
    with pytest.raises(RuntimeError, match="already initialised"):
        build_logger.initialize(hub)


def test_warning_event_becomes_warning_annotation(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer, "SolutionDir=/repo/")
    hub.raise_warning(
        BuildWarningEvent("unused variable", code="CS0168", file="/repo/src/Program.cs", line_number=10, column_number=5)
    )
    assert sink.lines == ["::warning file=src/Program.cs,line=10,col=5::CS0168: unused variable"]


def test_error_event_becomes_error_annotation(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer, "SolutionDir=/repo")
    hub.raise_error(BuildErrorEvent("; expected", code="CS1002", file="/repo/a.cs", line_number=3, column_number=1))
    assert sink.lines == ["::error file=a.cs,line=3,col=1::CS1002: ; expected"]


def test_errors_as_warnings_parameter_reports_errors_as_warnings(issuer: CommandIssuer, sink) -> None:
    build_logger, hub = _logger(issuer, "ErrorsAsWarnings=true")
    assert build_logger.errors_as_warnings
    hub.raise_error(BuildErrorEvent("boom", line_number=-1, column_number=-1))
    assert sink.lines == ["::warning::boom"]


def test_line_and_column_are_clamped(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer)
    hub.raise_warning(BuildWarningEvent("a", line_number=0, column_number=-1))
    hub.raise_warning(BuildWarningEvent("b", line_number=-4, column_number=0))
    assert sink.lines == ["::warning::a", "::warning col=0::b"]


def test_file_passes_through_without_solution_dir(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer)
    hub.raise_warning(BuildWarningEvent("w", file="/abs/path/file.cs", line_number=1, column_number=-1))
    assert sink.lines == ["::warning file=/abs/path/file.cs,line=1::w"]


def test_relative_event_file_is_resolved_against_cwd(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer, "SolutionDir=/work", cwd="/work/project")
    hub.raise_warning(BuildWarningEvent("w", file="lib/x.cs", column_number=-1))
    assert sink.lines == ["::warning file=project/lib/x.cs::w"]


def test_file_property_is_escaped(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer)
    hub.raise_warning(BuildWarningEvent("w", file="/tmp/a,b.cs", column_number=-1))
    assert sink.lines == ["::warning file=/tmp/a%2Cb.cs::w"]


@pytest.mark.parametrize(
    "verbosity, expected",
    [
        ("Quiet", []),
        ("Minimal", []),
        ("Normal", []),
        ("Detailed", ["compiling"]),
        ("Diagnostic", ["compiling"]),
    ],
)
def test_normal_info_is_gated_by_verbosity(issuer: CommandIssuer, sink, verbosity: str, expected: list[str]) -> None:
    _, hub = _logger(issuer, f"Verbosity={verbosity}")
    hub.raise_info(BuildMessageEvent("compiling", importance=MessageImportance.NORMAL))
    assert sink.lines == expected


def test_info_lines_are_written_without_protocol(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer, "Verbosity=Diagnostic")
    hub.raise_info(BuildMessageEvent("high", importance=MessageImportance.HIGH))
    hub.raise_info(BuildMessageEvent("low", importance=MessageImportance.LOW))
    assert sink.lines == ["high", "low"]


def test_high_importance_info_is_hidden_when_quiet(issuer: CommandIssuer, sink) -> None:
    _, hub = _logger(issuer, "Verbosity=Quiet")
    hub.raise_info(BuildMessageEvent("high", importance=MessageImportance.HIGH))
    assert sink.lines == []


@pytest.mark.parametrize(
    "path, root, expected",
    [
        ("/repo/src/a.cs", "/repo/", "src/a.cs"),
        ("/repo/a.cs", "/repo", "a.cs"),
        ("/elsewhere/a.cs", "/repo/", "../elsewhere/a.cs"),
        ("/repo/a.cs", None, "/repo/a.cs"),
        (None, "/repo", None),
        ("", None, None),
    ],
)
def test_relative_to_root(path: str | None, root: str | None, expected: str | None) -> None:
    assert relative_to_root(path, root) == expected
