"""Tests for onboard/cli.py"""

import json

import pytest

from onboard import __version__
from onboard.cli import COMMANDS, build_parser, main
from onboard.steps.registry import STEP_IDS


def interrupt(question):
    raise KeyboardInterrupt


class TestParser:
    def test_command_is_optional(self):
        args = build_parser().parse_args([])
        assert args.command is None

    def test_flags(self):
        args = build_parser().parse_args(["-V"])
        assert args.version is True

    def test_commands_table(self):
        assert set(COMMANDS) == {
            "help",
            "faqs",
            "arch-walkthrough",
            "getJenkinsPipelines",
            "progress",
            "reset",
        }


class TestCommands:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert f"onboard version {__version__}" in capsys.readouterr().out

    def test_help_shows_progress_path(self, capsys, tmp_path):
        assert main(["help"]) == 0
        out = capsys.readouterr().out
        assert "Available Commands:" in out
        assert str(tmp_path / "env-progress.json") in out

    def test_help_flag(self, capsys):
        assert main(["--help"]) == 0
        assert "Available Commands:" in capsys.readouterr().out

    def test_unknown_command_prints_help(self, capsys):
        assert main(["frobnicate"]) == 0
        out = capsys.readouterr().out
        assert "Unknown command: 'frobnicate'" in out
        assert "Available Commands:" in out

    @pytest.mark.parametrize(
        "command,expected",
        [
            ("faqs", "Frequently Asked Questions"),
            ("arch-walkthrough", "ARCHITECTURE WALKTHROUGH"),
            ("getJenkinsPipelines", "Key Jenkins Pipelines:"),
        ],
    )
    def test_reference_commands(self, capsys, command, expected):
        assert main([command]) == 0
        assert expected in capsys.readouterr().out

    def test_arch_walkthrough_does_not_mark_step(self, json_store):
        main(["arch-walkthrough"], store=json_store)
        assert not json_store.is_completed("architecture")

    def test_progress(self, json_store, capsys):
        json_store.mark_completed("jira")
        assert main(["progress"], store=json_store) == 0
        assert "10% (1/10 steps)" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "document",
        [
            {"completed": ["jira"], "completedSteps": {}, "startedAt": 5},
            {"completed": [], "lastUpdated": True},
        ],
    )
    def test_progress_with_mistyped_timestamps(self, json_store, progress_path, capsys, document):
        progress_path.parent.mkdir(parents=True)
        progress_path.write_text(json.dumps(document))

        assert main(["progress"], store=json_store) == 0
        assert "0% (0/10 steps)" in capsys.readouterr().out

    def test_reset(self, json_store, progress_path, capsys):
        json_store.mark_completed("jira")
        assert main(["reset"], store=json_store) == 0
        assert not progress_path.exists()
        assert "Progress reset successfully!" in capsys.readouterr().out

    def test_reset_without_progress(self, capsys):
        assert main(["reset"]) == 0
        assert "No progress file found" in capsys.readouterr().out

    def test_default_store_uses_env_path(self, tmp_path, scripted):
        main([], ask=scripted(["n", "y", "n"]))

        data = json.loads((tmp_path / "env-progress.json").read_text())
        assert data["completed"] == ["jira"]


class TestInteractive:
    def test_fresh_start_runs_checklist(self, json_store, scripted, capsys):
        ask = scripted(["n", "y", "n"])

        assert main([], ask=ask, store=json_store) == 0

        out = capsys.readouterr().out
        assert "Welcome aboard" in out
        assert json_store.load().completed == ["jira"]

    def test_partial_progress_opens_menu(self, json_store, scripted, capsys):
        json_store.mark_completed("jira")
        ask = scripted(["9"])

        main([], ask=ask, store=json_store)

        assert "What would you like to do?" in capsys.readouterr().out
        assert ask.questions == ["Enter your choice (1-9): "]

    def test_all_done_opens_menu(self, json_store, scripted, capsys):
        for step_id in STEP_IDS:
            json_store.mark_completed(step_id)

        main([], ask=scripted(["9"]), store=json_store)

        out = capsys.readouterr().out
        assert "already completed all onboarding steps" in out
        assert "What would you like to do?" in out

    def test_completion_can_return_to_menu(self, json_store, scripted):
        answers = ["n", "y", "y", "y", "1", "y", "y", "y", "y", "y", "skip", "y", "9"]
        ask = scripted(answers)

        main([], ask=ask, store=json_store)

        assert json_store.load().completed == list(STEP_IDS)
        assert ask.answers == []

    def test_ctrl_c_exits_130(self, json_store, capsys):
        assert main([], ask=interrupt, store=json_store) == 130
        assert "Interrupted" in capsys.readouterr().out
