"""Tests for routepath.cli — CLI entrypoint and subcommands."""

import json

import pytest

from routepath.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["names", "match", "build"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_names_missing_pattern(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["names"])
        assert exc_info.value.code == 2

    def test_match_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/users/:id"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "routepath" in captured.out


class TestNames:
    def test_prints_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["names", "/:org/files/*"])
        assert capsys.readouterr().out.splitlines() == ["org", "splat"]


class TestMatch:
    def test_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/users/:id", "/USERS/42"])
        assert json.loads(capsys.readouterr().out) == {"id": "42"}

    def test_no_match_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/users/:id", "/posts/42"])
        assert exc_info.value.code == 1
        assert "No match" in capsys.readouterr().err

    def test_case_sensitive_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--case-sensitive", "match", "/users/:id", "/USERS/42"])
        assert exc_info.value.code == 1

    def test_strict_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--strict", "match", "/a(/:id", "/a"])
        assert exc_info.value.code == 1
        assert "unclosed" in capsys.readouterr().err


class TestBuild:
    def test_prints_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build", "/users/:id(/:tab)", "-p", "id=7"])
        assert capsys.readouterr().out.strip() == "/users/7/"

    def test_splats_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build", "/*/to/*", "-s", "a", "-s", "b/c"])
        assert capsys.readouterr().out.strip() == "/a/to/b/c"

    def test_missing_param_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "/users/:id"])
        assert exc_info.value.code == 1
        assert 'Missing "id" parameter' in capsys.readouterr().err

    def test_bad_param_syntax_exits_two(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "/users/:id", "-p", "id"])
        assert exc_info.value.code == 2
