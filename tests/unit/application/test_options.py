"""Tests for application/options.py."""

import argparse

import pytest

from themereport.application.options import CheckFlags, resolve_options, resolve_version
from themereport.domain.model.enums import CheckVersion


class TestResolveVersion:
    """Tests for version flag precedence."""

    def test_defaults_to_latest(self) -> None:
        assert resolve_version(CheckFlags()) is CheckVersion.LATEST

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            (CheckFlags(v1=True), CheckVersion.V1),
            (CheckFlags(v2=True), CheckVersion.V2),
            (CheckFlags(v3=True), CheckVersion.V3),
            (CheckFlags(v4=True), CheckVersion.V4),
            (CheckFlags(canary=True), CheckVersion.CANARY),
        ],
    )
    def test_single_flag(self, flags: CheckFlags, expected: CheckVersion) -> None:
        assert resolve_version(flags) is expected

    def test_first_match_wins(self) -> None:
        """v1 beats v3 when both are set."""
        assert resolve_version(CheckFlags(v1=True, v3=True)) is CheckVersion.V1

    def test_v4_beats_canary(self) -> None:
        assert resolve_version(CheckFlags(v4=True, canary=True)) is CheckVersion.V4

    def test_all_set_resolves_v1(self) -> None:
        flags = CheckFlags(v1=True, v2=True, v3=True, v4=True, canary=True)
        assert resolve_version(flags) is CheckVersion.V1

    def test_missing_attributes_count_as_unset(self) -> None:
        """A namespace without v4 (or any flag) still resolves."""
        assert resolve_version(argparse.Namespace(canary=True)) is CheckVersion.CANARY


class TestResolveOptions:
    """Tests for resolve_options()."""

    def test_maps_verbose_and_fatal(self) -> None:
        config = resolve_options(CheckFlags(v2=True, verbose=True, fatal=True))
        assert config.check_version is CheckVersion.V2
        assert config.verbose is True
        assert config.only_fatal_errors is True

    def test_empty_namespace(self) -> None:
        config = resolve_options(argparse.Namespace())
        assert config.check_version is CheckVersion.LATEST
        assert config.verbose is False
        assert config.only_fatal_errors is False
