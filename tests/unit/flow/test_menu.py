"""Tests for onboard/menu.py and onboard/buddy.py"""

import pytest

from onboard.buddy import setup_buddy
from onboard.menu import MENU_OPTIONS, MenuController, print_reset_result
from onboard.progress.store import InMemoryProgressStore
from onboard.steps.registry import STEP_IDS


@pytest.fixture
def menu_for(memory_store, scripted):
    def _menu(answers):
        return MenuController(memory_store, scripted(answers))

    return _menu


class TestLoop:
    def test_show_includes_step_count(self, memory_store, menu_for, capsys):
        memory_store.mark_completed("jira")
        menu_for([]).show()
        out = capsys.readouterr().out
        assert "1. Continue onboarding (1/10 steps completed)" in out
        assert f"{len(MENU_OPTIONS)}. Exit" in out

    def test_exit_stops_loop(self, menu_for, capsys):
        menu = menu_for(["9"])
        menu.run()
        assert "See you later!" in capsys.readouterr().out
        assert menu.ask.answers == []

    def test_invalid_choice_shows_menu_again(self, menu_for, capsys):
        menu = menu_for(["42", "9"])
        menu.run()
        out = capsys.readouterr().out
        assert "Invalid choice. Please try again." in out
        assert out.count("What would you like to do?") == 2

    def test_view_progress(self, memory_store, menu_for, capsys):
        memory_store.mark_completed("jira")
        menu_for(["2", "9"]).run()
        assert "10% (1/10 steps)" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "choice,expected",
        [
            ("3", "ARCHITECTURE WALKTHROUGH"),
            ("7", "Frequently Asked Questions"),
            ("8", "Available Commands:"),
        ],
    )
    def test_reference_screens(self, menu_for, capsys, choice, expected):
        menu_for([choice, "9"]).run()
        assert expected in capsys.readouterr().out

    def test_halted_onboarding_ends_session(self, memory_store, menu_for):
        memory_store.mark_completed("jira")
        menu = menu_for(["1", "n"])
        menu.run()
        assert menu.ask.answers == []
        assert memory_store.load().completed == ["jira"]

    def test_completed_onboarding_can_return_to_menu(self, memory_store, menu_for):
        for step_id in STEP_IDS[:-1]:
            memory_store.mark_completed(step_id)
        menu = menu_for(["1", "skip", "y", "9"])
        menu.run()
        assert memory_store.load().completed == list(STEP_IDS)
        assert menu.ask.answers == []


class TestUndo:
    def test_undo_step(self, memory_store, menu_for):
        memory_store.mark_completed("jira")
        assert menu_for([]).undo_step("jira") is True
        assert not memory_store.is_completed("jira")

    def test_choose_and_confirm(self, memory_store, menu_for, capsys):
        memory_store.mark_completed("jira")
        memory_store.mark_completed("vpn")

        assert menu_for(["2", "yes"]).choose_step_to_undo() is True

        assert memory_store.load().completed == ["jira"]
        assert '"VPN Access" marked as incomplete.' in capsys.readouterr().out

    def test_confirmation_needs_full_yes(self, memory_store, menu_for):
        memory_store.mark_completed("jira")
        assert menu_for(["1", "y"]).choose_step_to_undo() is False
        assert memory_store.is_completed("jira")

    @pytest.mark.parametrize("choice", ["2", "abc", ""])
    def test_cancel(self, memory_store, menu_for, capsys, choice):
        memory_store.mark_completed("jira")
        assert menu_for([choice]).choose_step_to_undo() is False
        assert "Cancelled." in capsys.readouterr().out
        assert memory_store.is_completed("jira")

    @pytest.mark.parametrize("choice", ["0", "5"])
    def test_out_of_range(self, memory_store, menu_for, capsys, choice):
        memory_store.mark_completed("jira")
        assert menu_for([choice]).choose_step_to_undo() is False
        assert "Invalid choice." in capsys.readouterr().out

    def test_nothing_to_undo(self, menu_for, capsys):
        assert menu_for([]).choose_step_to_undo() is False
        assert "No completed steps to undo." in capsys.readouterr().out

    def test_unknown_ids_are_not_listed(self, clock, scripted, capsys):
        store = InMemoryProgressStore(clock=clock, data={"completed": ["old-step", "jira"]})
        MenuController(store, scripted(["2"])).choose_step_to_undo()
        out = capsys.readouterr().out
        assert "old-step" not in out
        assert "2. Cancel" in out


class TestReset:
    def test_reset_confirmed(self, memory_store, menu_for, capsys):
        memory_store.mark_completed("jira")
        assert menu_for(["yes"]).reset_all() is True
        assert memory_store.load().completed == []
        assert "Progress reset successfully!" in capsys.readouterr().out

    def test_reset_declined(self, memory_store, menu_for, capsys):
        memory_store.mark_completed("jira")
        assert menu_for(["y"]).reset_all() is False
        assert memory_store.is_completed("jira")
        assert "Progress preserved." in capsys.readouterr().out

    @pytest.mark.parametrize(
        "result,expected",
        [
            ({"success": True, "removed": ["memory"]}, "Progress reset successfully!"),
            ({"success": True, "removed": []}, "No progress file found. Starting fresh!"),
            ({"success": False, "error": "disk full", "removed": []}, "disk full"),
        ],
    )
    def test_print_reset_result(self, capsys, result, expected):
        print_reset_result(result)
        assert expected in capsys.readouterr().out


class TestBuddy:
    def test_set_buddy(self, memory_store, menu_for):
        menu_for([]).set_buddy("Priya", "priya@example.com")
        assert memory_store.load().buddy.name == "Priya"

    def test_setup_new_buddy(self, memory_store, scripted):
        assert setup_buddy(memory_store, scripted(["Priya", "priya@example.com"])) is True
        assert memory_store.load().buddy.contact == "priya@example.com"

    def test_update_declined(self, memory_store, scripted):
        memory_store.set_buddy("Priya", "priya@example.com")
        assert setup_buddy(memory_store, scripted(["n"])) is False
        assert memory_store.load().buddy.name == "Priya"

    def test_update_accepted(self, memory_store, scripted):
        memory_store.set_buddy("Priya", "priya@example.com")
        assert setup_buddy(memory_store, scripted(["y", "Sam", "sam@example.com"])) is True
        assert memory_store.load().buddy.name == "Sam"

    @pytest.mark.parametrize("answers", [[""], ["Priya", ""]])
    def test_blank_fields_abort(self, memory_store, scripted, answers):
        assert setup_buddy(memory_store, scripted(answers)) is False
        assert memory_store.load().buddy is None

    def test_from_menu(self, memory_store, menu_for):
        menu_for(["4", "Priya", "priya@example.com", "9"]).run()
        assert memory_store.load().buddy.name == "Priya"
