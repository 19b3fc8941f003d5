"""
Tests for the console front end (UI.ConsoleUI).
"""

import io
from unittest.mock import patch

import pyperclip
import pytest

from kaltui import Session, UI


@pytest.fixture
def console(settings):
    return UI.ConsoleUI(Session.Session(settings), out=io.StringIO())


def output(console):
    return console.out.getvalue().splitlines()


class TestLines:
    def test_calculation_is_echoed(self, console):
        console.handle_line("1'000 + 2'345\n")
        assert output(console) == ["1'000 + 2'345 = 3'345"]

    def test_trailing_equals(self, console):
        console.handle_line("2x3=")
        assert output(console) == ["2*3 = 6"]

    def test_invalid_character(self, console):
        console.handle_line("2+a")
        assert output(console) == ["Invalid input: 'a'"]
        assert console.session.input == ""

    def test_error_message(self, console):
        console.handle_line("1/0")
        assert output(console) == ["Error: Division by zero", "  Calculator Error 3003, input: 1/0"]
        assert console.session.input == ""

    def test_error_shows_category_and_code(self, console):
        console.handle_line("(1+2")
        assert output(console)[-1] == "  Calculator Error 3032, input: (1+2"

    def test_equals_inside_line_is_invalid(self, console):
        console.handle_line("1=2")
        assert output(console) == ["Invalid input: '='"]
        assert console.session.history == []
        assert console.session.input == ""

    def test_equals_inside_line_keeps_pasted_input(self, console):
        console.session.paste("4+")
        console.handle_line("1=2")
        assert output(console) == ["Invalid input: '='"]
        assert console.session.input == "4+"
        assert console.session.history == []

    def test_only_equals(self, console):
        console.handle_line("=")
        assert output(console) == ["Nothing to evaluate"]

    def test_blank_line_ignored(self, console):
        console.handle_line("   \n")
        assert output(console) == []


class TestCommands:
    def test_history(self, console):
        console.handle_line("1+1")
        console.handle_line("2+2")
        console.handle_line(":history")
        assert output(console)[-2:] == ["   0  2+2 = 4", "   1  1+1 = 2"]

    def test_empty_history(self, console):
        console.handle_line(":history")
        assert output(console) == ["No history yet"]

    def test_yank_last_result(self, console):
        console.handle_line("6*7")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank")
        copy.assert_called_once_with("42")
        assert output(console)[-1] == "Yanked: 42"

    def test_yank_history_entry(self, console):
        console.handle_line("1+1")
        console.handle_line("2+2")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank 1")
        copy.assert_called_once_with("2")

    def test_yank_bad_index(self, console):
        console.handle_line(":yank one")
        assert output(console) == ["Not a history index: one"]

    def test_yank_index_out_of_range(self, console):
        console.handle_line("1+1")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank 3")
        copy.assert_not_called()
        assert output(console)[-1] == "Not a history index: 3"

    def test_yank_follows_focus(self, console):
        console.handle_line("1+1")
        console.handle_line("2+2")
        console.handle_line(":bottom")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank")
        copy.assert_called_once_with("2")

    def test_focus_returns_to_result_after_calculation(self, console):
        console.handle_line("1+1")
        console.handle_line(":top")
        console.handle_line("3+3")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank")
        copy.assert_called_once_with("6")

    def test_paste_then_finish_line(self, console):
        with patch.object(pyperclip, "paste", return_value="10x"):
            console.handle_line(":paste")
        console.handle_line("3")
        assert output(console) == ["Pasted: 10*", "Input: 10*", "10*3 = 30"]

    def test_paste_with_auto_enter(self, settings):
        settings["after_paste_enter"] = True
        console = UI.ConsoleUI(Session.Session(settings), out=io.StringIO())
        with patch.object(pyperclip, "paste", return_value="5:2"):
            console.handle_line(":paste")
        assert output(console) == ["5/2 = 2.5"]

    def test_backspace_edits_pasted_input(self, console):
        with patch.object(pyperclip, "paste", return_value="10x"):
            console.handle_line(":paste")
        console.handle_line(":back")
        console.handle_line("0")
        assert output(console)[-2:] == ["Input: 10", "100 = 100"]

    def test_clear(self, console):
        console.handle_line(":clear")
        assert output(console) == ["Cleared"]

    def test_settings(self, console):
        console.handle_line(":settings")
        assert any(line.strip().startswith("max_history = 1000") for line in output(console))

    def test_help(self, console):
        console.handle_line(":help")
        assert len(output(console)) == len(UI.HELP_TEXT)

    def test_unknown_command(self, console):
        console.handle_line(":frobnicate")
        assert output(console) == ["Unknown command: :frobnicate (try :help)"]


class TestRun:
    def test_stops_at_quit(self, console):
        console.run(io.StringIO("1+1\n:quit\n2+2\n"))
        assert output(console) == ["1+1 = 2"]
        assert not console.running

    def test_stops_at_end_of_input(self, console):
        console.run(io.StringIO("3^2\n"))
        assert output(console) == ["3^2 = 9"]


class TestNavigation:
    @pytest.fixture
    def filled(self, console):
        for line in ("1+1", "2+2", "3+3"):
            console.handle_line(line)
        console.out.truncate(0)
        console.out.seek(0)
        return console

    def test_down_starts_at_newest(self, filled):
        filled.handle_line(":down")
        filled.handle_line(":down")
        assert output(filled) == ["   0  3+3 = 6", "   1  2+2 = 4"]

    def test_up_wraps_to_oldest(self, filled):
        filled.handle_line(":up")
        assert output(filled) == ["   2  1+1 = 2"]

    def test_top_and_bottom(self, filled):
        filled.handle_line(":bottom")
        filled.handle_line(":top")
        assert output(filled) == ["   2  1+1 = 2", "   0  3+3 = 6"]

    def test_navigation_focuses_history(self, filled):
        filled.handle_line(":top")
        assert filled.session.focus == Session.HISTORY

    def test_navigation_on_empty_history(self, console):
        console.handle_line(":down")
        assert output(console) == ["No history yet"]
        assert console.session.focus == Session.RESULT


class TestFocus:
    def test_default_focus_is_result(self, console):
        assert console.session.focus == Session.RESULT

    def test_cycle(self, console):
        console.handle_line(":focus")
        console.handle_line(":focus")
        console.handle_line(":focus")
        assert output(console) == ["Focus: history", "Focus: input", "Focus: result"]

    def test_named(self, console):
        console.handle_line(":focus input")
        assert console.session.focus == Session.INPUT
        assert output(console) == ["Focus: input"]

    def test_unknown_name(self, console):
        console.handle_line(":focus sideways")
        assert output(console) == ["Unknown focus: sideways (input, result or history)"]
        assert console.session.focus == Session.RESULT

    def test_yank_input_focus(self, console):
        console.session.paste("12+")
        console.handle_line(":focus input")
        with patch.object(pyperclip, "copy") as copy:
            console.handle_line(":yank")
        copy.assert_called_once_with("12+")
