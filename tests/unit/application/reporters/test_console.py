"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- Section order and headers
- FEATURE findings never listed
- Footer links
- Styled vs plain output
"""

import pytest

from tests.factories import make_config, make_finding, make_theme_result
from themereport.application.reporters.console import (
    DOCS_URL,
    ONLINE_CHECKER_URL,
    ConsoleConfig,
    ConsoleReporter,
)
from themereport.domain.model.enums import Severity
from themereport.domain.model.theme_result import ThemeResult


def plain_report(result: ThemeResult, verbose: bool = False) -> str:
    reporter = ConsoleReporter(ConsoleConfig(no_color=True))
    return reporter.report(result, make_config(verbose=verbose))


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width is None
        assert config.no_color is False
        assert config.force_terminal is True
        assert config.color_system == "auto"

    def test_invalid_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter.report()."""

    def test_starts_with_blank_line_and_summary(self) -> None:
        output = plain_report(make_theme_result())
        assert output.startswith("\n✓ Your theme is compatible with Ghost 5.x\n")

    def test_no_sections_when_clean(self) -> None:
        output = plain_report(make_theme_result(features=2))
        assert "Errors" not in output
        assert "Warnings" not in output
        assert "Recommendations" not in output

    def test_error_section_with_subtitle(self) -> None:
        output = plain_report(make_theme_result(errors=1))
        assert "\nErrors\n------\nImportant to fix, functionality may be degraded.\n\n- Error: error-1\n" in output

    def test_warning_section_has_no_subtitle(self) -> None:
        output = plain_report(make_theme_result(warnings=1))
        assert "\nWarnings\n--------\n- Warning: warning-1\n" in output

    def test_recommendation_section(self) -> None:
        output = plain_report(make_theme_result(recommendations=1))
        assert "\nRecommendations\n---------------\n- Recommendation: recommendation-1\n" in output

    def test_section_order(self) -> None:
        """Sections appear as errors, warnings, recommendations."""
        output = plain_report(make_theme_result(errors=1, warnings=1, recommendations=1))
        assert output.index("Errors") < output.index("Warnings") < output.index("Recommendations")

    def test_features_never_rendered(self) -> None:
        output = plain_report(make_theme_result(errors=1, features=2))
        assert "feature-1" not in output
        assert "Feature" not in output

    def test_findings_keep_checker_order(self) -> None:
        result = ThemeResult(
            checked_version="5.x",
            results={
                Severity.WARNING: (
                    make_finding(rule="zeta", level=Severity.WARNING),
                    make_finding(rule="alpha", level=Severity.WARNING),
                ),
            },
        )
        output = plain_report(result)
        assert output.index("zeta") < output.index("alpha")

    def test_footer_links(self) -> None:
        output = plain_report(make_theme_result(errors=1))
        assert output.endswith(
            f"\nGet more help at {DOCS_URL}\nYou can also check theme compatibility at {ONLINE_CHECKER_URL}\n"
        )

    def test_verbose_passes_through(self) -> None:
        result = ThemeResult(
            checked_version="5.x",
            results={Severity.ERROR: (make_finding(details="See docs", refs=("post.hbs",)),)},
        )
        output = plain_report(result, verbose=True)
        assert "Details: See docs" in output
        assert "post.hbs - post.hbs failed" in output

    def test_plain_output_has_no_ansi(self) -> None:
        output = plain_report(make_theme_result(errors=2, warnings=1))
        assert "\x1b[" not in output

    def test_styled_output_has_ansi(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color_system="standard"))
        output = reporter.report(make_theme_result(errors=1), make_config())
        assert "\x1b[" in output


class TestRenderLines:
    """Tests for ConsoleReporter.render_lines()."""

    def test_renders_markup_lines(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(no_color=True))
        assert reporter.render_lines(["[bold]a[/bold]", "", "b"]) == "a\n\nb\n"
