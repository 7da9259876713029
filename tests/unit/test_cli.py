"""Unit tests for the restdoc command-line interface."""

import pytest
from click.testing import CliRunner

from restdoc import __version__
from restdoc.cli import main

TARGET = "tests.fixtures.sample_cli:app"


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CliRunner working in an empty directory (no config files)."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestGenerateCommand:
    """Test 'restdoc generate'."""

    def test_generate_help(self, runner):
        result = runner.invoke(main, ["generate", "--help"])
        assert result.exit_code == 0
        assert "--prog-name" in result.output
        assert "--no-autogen-tag" in result.output

    def test_generate_writes_eligible_pages(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, ["generate", TARGET, str(out)])

        assert result.exit_code == 0, result.output
        assert "Generated 4 page(s)" in result.output
        assert sorted(p.name for p in out.iterdir()) == [
            "app-storage-mount.txt",
            "app-storage.txt",
            "app-sub.txt",
            "app.txt",
        ]

    def test_generated_page_content(self, runner, tmp_path):
        out = tmp_path / "out"
        runner.invoke(main, ["generate", TARGET, str(out)])

        page = (out / "app-storage-mount.txt").read_text(encoding="utf-8")
        assert "=================\napp storage mount\n=================\n" in page
        assert "   app storage mount SHARE [options]\n" in page
        assert "   * - --retries\n     - int\n     - Connection attempts. This value defaults to 3.\n" in page
        assert "Inherited Options" in page
        assert "   * - -P, --profile\n" in page
        assert "debug-trace" not in page
        assert " app storage mount data --read-only\n" in page
        assert "* `app storage <app_storage.txt>`_ \t - Manage storage shares.\n" in page
        assert "*Auto generated by restdoc on " in page

    def test_prog_name_and_extension(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            main, ["generate", TARGET, str(out), "--prog-name", "acme", "--extension", "rst"]
        )

        assert result.exit_code == 0, result.output
        assert (out / "acme-sub.rst").exists()
        assert "`acme sub <acme_sub.rst>`_" in (out / "acme.rst").read_text(encoding="utf-8")

    def test_no_autogen_tag(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, ["generate", TARGET, str(out), "--no-autogen-tag"])

        assert result.exit_code == 0, result.output
        for page in out.iterdir():
            assert "Auto generated" not in page.read_text(encoding="utf-8")

    def test_prepend_template(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, ["generate", TARGET, str(out), "--prepend", ".. {name}\n\n"])

        assert result.exit_code == 0, result.output
        assert (out / "app-sub.txt").read_text(encoding="utf-8").startswith(".. app-sub\n\n.. _app_sub:")

    def test_examples_dir(self, runner, tmp_path):
        examples = tmp_path / "examples"
        examples.mkdir()
        (examples / "app-sub.yaml").write_text(
            "examples:\n  - command: app sub --name from-yaml\n", encoding="utf-8"
        )
        out = tmp_path / "out"
        result = runner.invoke(main, ["generate", TARGET, str(out), "--examples-dir", str(examples)])

        assert result.exit_code == 0, result.output
        assert " app sub --name from-yaml\n" in (out / "app-sub.txt").read_text(encoding="utf-8")

    def test_uses_config_file(self, runner, tmp_path):
        (tmp_path / "restdoc.toml").write_text(
            f'target = "{TARGET}"\noutput_dir = "docs"\ngenerator = "Sample CLI"\n', encoding="utf-8"
        )
        result = runner.invoke(main, ["generate"])

        assert result.exit_code == 0, result.output
        assert "by Sample CLI on" in (tmp_path / "docs" / "app.txt").read_text(encoding="utf-8")

    def test_missing_target(self, runner, tmp_path):
        result = runner.invoke(main, ["generate"])
        assert result.exit_code == 2
        assert "No target given" in result.output

    def test_missing_output_dir(self, runner):
        result = runner.invoke(main, ["generate", TARGET])
        assert result.exit_code == 2
        assert "No output directory given" in result.output

    def test_bad_target(self, runner, tmp_path):
        result = runner.invoke(main, ["generate", "no_such_pkg.cli:main", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Error: Cannot import module 'no_such_pkg.cli'" in result.output

    def test_output_dir_is_a_file(self, runner, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        result = runner.invoke(main, ["generate", TARGET, str(blocker / "out")])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestShowCommand:
    """Test 'restdoc show'."""

    def test_show_root(self, runner):
        result = runner.invoke(main, ["show", TARGET])

        assert result.exit_code == 0, result.output
        assert result.output.startswith(".. _app:\n\n===\napp\n===\n")
        assert "* `app storage <app_storage.txt>`_" in result.output
        assert "app old" not in result.output

    def test_show_nested_command(self, runner):
        result = runner.invoke(main, ["show", TARGET, "storage", "mount"])

        assert result.exit_code == 0, result.output
        assert ".. _app_storage_mount:" in result.output
        assert "Inherited Options" in result.output

    def test_show_unknown_command(self, runner):
        result = runner.invoke(main, ["show", TARGET, "nope"])
        assert result.exit_code == 1
        assert "No such command: app nope" in result.output


class TestMainGroup:
    """Test top-level options."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(main, ["--config", str(tmp_path / "nope.toml"), "show", TARGET])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "show" in result.output
