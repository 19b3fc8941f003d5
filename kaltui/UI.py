# UI.py
"""Console front end for the calculator.

Structure
---------
- Every input line that is not a command is typed into the Session and evaluated.
- Lines starting with ':' are commands (see HELP_TEXT).
- Results are echoed as "<expression> = <result>", failures as "Error: <message>"
  followed by the error category, code and input.

Responsibilities
----------------
- Own the read / evaluate / print loop
- Route commands to the Session (history navigation, focus, clipboard, editing)
- Show settings and their descriptions via config_manager
"""

import sys
import logging

from . import error as E
from . import config_manager as config_manager
from . import Session as Session

logger = logging.getLogger(__name__)

PROMPT = "> "

HELP_TEXT = (
    ("<expression>", "Calculate (digits, + - * / ^, parentheses, x and : as aliases)"),
    (":history", "Show previous calculations, newest first"),
    (":up / :down", "Select the newer / older history entry (wraps around)"),
    (":top / :bottom", "Select the newest / oldest history entry"),
    (":focus [name]", "Switch the yank source: input, result or history"),
    (":yank [n]", "Copy the focused value (or history entry n) to the clipboard"),
    (":paste", "Paste the clipboard into the next calculation"),
    (":back", "Delete the last character of pasted input"),
    (":clear", "Clear input and result"),
    (":settings", "Show the current settings"),
    (":help", "Show this help"),
    (":quit", "Exit"),
)

NAVIGATION = {
    "up": "history_prev",
    "down": "history_next",
    "top": "history_top",
    "bottom": "history_bottom",
}


class ConsoleUI:

    def __init__(self, session=None, out=None):
        self.session = session if session is not None else Session.Session()
        # There is no live input field on a console; yank the last result by default
        self.session.focus = Session.RESULT
        self.out = out if out is not None else sys.stdout
        self.running = True

    def write(self, text=""):
        self.out.write(text + "\n")

    def show_status(self):
        if self.session.status:
            self.write(self.session.status)

    def show_error(self):
        """Status line plus the category, code and input of the last failure."""
        self.show_status()
        error = self.session.error
        if error is not None:
            self.write(f"  {E.error_category(error.code)} {error.code}, input: {error.equation}")

    def show_selected(self):
        entry = self.session.selected_entry()
        if entry is None:
            self.write("No history yet")
            return
        expression, result = entry
        self.write(f"{self.session.selected:>4}  {expression} = {result}")

    def handle_line(self, line):
        line = line.strip()
        if not line:
            return
        if line.startswith(":"):
            self.handle_command(line[1:])
            return

        session = self.session
        # Only a trailing "=" triggers the calculation; anywhere else it is invalid input
        line = line.rstrip("=").rstrip()
        for c in line:
            if not Session.accepts(c):
                session.reject(c)
                self.show_status()
                return
        session.type_text(line)

        expression = session.input
        if session.evaluate():
            session.focus = Session.RESULT
            self.write(f"{expression} = {session.result}")
        else:
            self.show_error()
            session.input = ""

    def handle_command(self, command):
        name, _, argument = command.partition(" ")
        argument = argument.strip()
        session = self.session

        if name in ("q", "quit", "exit"):
            self.running = False

        elif name in ("h", "help"):
            width = max(len(key) for key, _ in HELP_TEXT)
            for key, description in HELP_TEXT:
                self.write(f"  {key.ljust(width)}  {description}")

        elif name == "history":
            items = session.history_items()
            if not items:
                self.write("No history yet")
            for b, (expression, result) in enumerate(items):
                self.write(f"{b:>4}  {expression} = {result}")

        elif name in NAVIGATION:
            getattr(session, NAVIGATION[name])()
            if session.selected is not None:
                session.focus = Session.HISTORY
            self.show_selected()

        elif name == "focus":
            if not argument:
                session.cycle_focus()
            elif argument in Session.FOCUS_ORDER:
                session.focus = argument
            else:
                self.write(f"Unknown focus: {argument} (input, result or history)")
                return
            self.write(f"Focus: {session.focus}")

        elif name in ("y", "yank"):
            if argument:
                try:
                    index = int(argument)
                except ValueError:
                    self.write(f"Not a history index: {argument}")
                    return
                if not session.select_history(index):
                    self.write(f"Not a history index: {argument}")
                    return
            session.yank()
            self.show_status()

        elif name in ("p", "paste"):
            session.paste()
            if session.status == "Calculated":
                expression, result = session.history[-1]
                self.write(f"{expression} = {result}")
                return
            self.show_status()
            if session.input:
                self.write(f"Input: {session.input}")

        elif name in ("b", "back", "backspace"):
            session.backspace()
            self.write(f"Input: {session.input}")

        elif name in ("d", "clear"):
            session.clear()
            self.show_status()

        elif name == "settings":
            descriptions = config_manager.load_setting_description("all")
            for key, value in session.settings.items():
                description = descriptions.get(key, "")
                self.write(f"  {key} = {value!r}  {description}".rstrip())

        else:
            self.write(f"Unknown command: :{name} (try :help)")

    def run(self, stream=None):
        stream = stream if stream is not None else sys.stdin
        interactive = stream.isatty()
        while self.running:
            if interactive:
                self.out.write(PROMPT + self.session.input)
                self.out.flush()
            line = stream.readline()
            if not line:
                break
            self.handle_line(line)


def main():
    # --- Main Application Entry Point ---
    ui = ConsoleUI()
    try:
        ui.run()
    except KeyboardInterrupt:
        logger.debug("interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
