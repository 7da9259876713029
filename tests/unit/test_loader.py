"""Unit tests for resolving command references."""

import pytest

from restdoc.exceptions import CommandLoadError
from restdoc.loader import load_command
from tests.fixtures.sample_cli import app


class TestLoadCommand:
    """Tests for load_command."""

    def test_loads_group(self):
        assert load_command("tests.fixtures.sample_cli:app") is app

    def test_dotted_attribute_resolved_before_type_check(self):
        with pytest.raises(CommandLoadError, match=r"is not a Click command \(got dict\)"):
            load_command("tests.fixtures.sample_cli:app.commands")

    @pytest.mark.parametrize("target", ["tests.fixtures.sample_cli", ":app", "tests.fixtures.sample_cli:"])
    def test_malformed_target(self, target):
        with pytest.raises(CommandLoadError, match="expected 'package.module:attribute'"):
            load_command(target)

    def test_missing_module(self):
        with pytest.raises(CommandLoadError, match="Cannot import module"):
            load_command("tests.fixtures.no_such_module:app")

    def test_missing_attribute(self):
        with pytest.raises(CommandLoadError, match="has no attribute"):
            load_command("tests.fixtures.sample_cli:missing")

    def test_not_a_command(self):
        with pytest.raises(CommandLoadError, match="is not a Click command"):
            load_command("tests.fixtures.sample_cli:not_a_command")
