"""Tests for services/orchestrator.py."""

import asyncio
import io
import logging

import pytest

from tests.factories import FakeChecker, make_config, make_theme_result
from themereport.application.reporters.console import ConsoleConfig, ConsoleReporter
from themereport.application.services.invoker import ZIP_HINT
from themereport.application.services.orchestrator import (
    BANNER,
    FATAL_BANNER,
    ReportOrchestrator,
    exit_code_for,
    run_check,
)
from themereport.domain.model.enums import ExitCode
from themereport.domain.model.theme_result import ThemeResult

PLAIN = ConsoleReporter(ConsoleConfig(no_color=True))


def render(checker: FakeChecker, result: ThemeResult) -> tuple[ExitCode, str]:
    output = io.StringIO()
    orchestrator = ReportOrchestrator(checker, PLAIN, output)
    code = asyncio.run(orchestrator.render(result, make_config()))
    return code, output.getvalue()


class TestExitCodeFor:
    """Tests for exit_code_for()."""

    def test_errors_fail(self) -> None:
        assert exit_code_for(make_theme_result(errors=1)) is ExitCode.ERRORS

    @pytest.mark.parametrize(
        "result",
        [
            make_theme_result(),
            make_theme_result(warnings=5),
            make_theme_result(recommendations=2),
            make_theme_result(features=3),
            make_theme_result(warnings=1, recommendations=1, features=1),
        ],
    )
    def test_non_errors_pass(self, result: ThemeResult) -> None:
        """Warnings, recommendations and features never fail the run."""
        assert exit_code_for(result) is ExitCode.OK


class TestReportOrchestrator:
    """Tests for ReportOrchestrator.render()."""

    def test_writes_report_and_returns_ok(self) -> None:
        code, output = render(FakeChecker(), make_theme_result(warnings=1))
        assert code == 0
        assert "Your theme has 1 warning!" in output
        assert "Get more help at" in output

    def test_returns_one_on_errors(self) -> None:
        code, _ = render(FakeChecker(), make_theme_result(errors=1))
        assert code == 1

    def test_exit_code_uses_formatted_result(self) -> None:
        """Formatter output, not the raw result, decides the exit code."""
        checker = FakeChecker(formatted=make_theme_result())
        code, output = render(checker, make_theme_result(errors=3))
        assert code == ExitCode.OK
        assert "compatible with Ghost" in output

    def test_formatter_failure_still_reports(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing format step falls back to the unformatted result."""
        checker = FakeChecker(format_error=RuntimeError("bad format"))

        with caplog.at_level(logging.ERROR, logger="themereport"):
            code, output = render(checker, make_theme_result(errors=2, warnings=1))

        assert code == ExitCode.ERRORS
        assert "2 errors and 1 warning!" in output
        assert "Get more help at" in output
        assert "bad format" in caplog.text

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        orchestrator = ReportOrchestrator(FakeChecker(), PLAIN)
        asyncio.run(orchestrator.render(make_theme_result(), make_config()))
        assert "compatible with Ghost" in capsys.readouterr().out


class TestRunCheck:
    """Tests for run_check()."""

    def test_full_pipeline(self) -> None:
        output = io.StringIO()
        checker = FakeChecker(make_theme_result(errors=1, checked_version="5.x"))

        code = asyncio.run(run_check(checker, "theme", False, make_config(), reporter=PLAIN, output=output))

        assert code == ExitCode.ERRORS
        text = output.getvalue()
        assert text.startswith(f"\n{BANNER}\n")
        assert "Your theme has 1 error!" in text
        assert [call[0] for call in checker.calls] == ["check", "format"]

    def test_fatal_banner(self) -> None:
        output = io.StringIO()
        config = make_config(only_fatal_errors=True)
        asyncio.run(run_check(FakeChecker(), "theme", False, config, reporter=PLAIN, output=output))
        text = output.getvalue()
        assert FATAL_BANNER in text
        assert "no fatal compatibility issues" in text

    def test_zip_path_in_directory_mode(self) -> None:
        """Corrective hint instead of a report; nothing rendered."""
        output = io.StringIO()
        checker = FakeChecker(error=NotADirectoryError("ENOTDIR: not a directory"))

        code = asyncio.run(run_check(checker, "theme.zip", False, make_config(), reporter=PLAIN, output=output))

        text = output.getvalue()
        assert code == ExitCode.INVOCATION_FAILED
        assert "ENOTDIR: not a directory" in text
        assert ZIP_HINT in text
        assert "Your theme" not in text
        assert "Get more help" not in text
        assert [call[0] for call in checker.calls] == ["check"]

    def test_other_failure_prints_message_only(self) -> None:
        output = io.StringIO()
        checker = FakeChecker(error=RuntimeError("zip is corrupt [central directory]"))

        code = asyncio.run(run_check(checker, "theme.zip", True, make_config(), reporter=PLAIN, output=output))

        text = output.getvalue()
        assert code == ExitCode.INVOCATION_FAILED
        assert "zip is corrupt [central directory]" in text
        assert ZIP_HINT not in text

    def test_raw_result_with_extra_keys_is_reported(self) -> None:
        """Non-severity keys in a raw result do not stop the report."""
        output = io.StringIO()
        checker = FakeChecker(
            {
                "checkedVersion": "5.x",
                "results": {
                    "pass": ["GS010-PJ-REQ"],
                    "hasFatalErrors": False,
                    "error": [{"rule": "r", "level": "error"}],
                    "warning": [],
                    "recommendation": [],
                },
            }
        )

        code = asyncio.run(run_check(checker, "theme", False, make_config(), reporter=PLAIN, output=output))

        assert code == ExitCode.ERRORS
        assert "Your theme has 1 error!" in output.getvalue()
