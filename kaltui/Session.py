# Session.py
"""Interactive calculator state kept around the engine.

The session owns the input line, the last result, a status message and the
history of successful calculations. Front ends feed it characters or whole
lines and read back ``input`` / ``result`` / ``status``.
"""

import logging

import pyperclip

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine
from . import Formatter as Formatter

logger = logging.getLogger(__name__)

# Characters accepted as typed input
INPUT_CHARS = set("0123456789.+-*/^()'")
# Characters kept from pasted text (thousands separators are not pasted)
PASTE_CHARS = set("0123456789.+-*/^() xX:")
# Alternative operator spellings
ALIASES = {"x": "*", "X": "*", ":": "/"}

INPUT = "input"
RESULT = "result"
HISTORY = "history"
# Order used when cycling the focus
FOCUS_ORDER = (INPUT, RESULT, HISTORY)


def accepts(c):
    """True if typing ``c`` edits the input line."""
    return c in INPUT_CHARS or c in ALIASES or c == " "


def filter_paste(text):
    """Keep calculator characters only and translate operator aliases."""
    return "".join(ALIASES.get(c, c) for c in text if c in PASTE_CHARS)


class Session:

    def __init__(self, settings=None):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        self.settings = settings
        self.max_history = config_manager.history_limit(settings)
        self.input = ""
        self.result = ""
        self.status = ""
        self.history = []      # (expression, result), oldest first
        self.selected = None   # index into history_items(), newest first
        self.focus = INPUT
        self.error = None      # MathError of the last failed evaluation

    # -----------------------------
    # Editing
    # -----------------------------

    def type_char(self, c):
        if c in INPUT_CHARS:
            self.input += c
            self.status = ""
        elif c == " ":
            # No leading or doubled spaces
            if self.input and not self.input.endswith(" "):
                self.input += " "
        elif c in ALIASES:
            self.input += ALIASES[c]
            self.status = ""
        elif c == "=":
            self.evaluate()
        else:
            self.reject(c)

    def reject(self, c):
        """Report ``c`` as invalid input without touching the input line."""
        self.status = E.ERROR_MESSAGES["4004"] + f"'{c}'"

    def type_text(self, text):
        for c in text:
            self.type_char(c)

    def backspace(self):
        if self.input:
            self.input = self.input[:-1]
            self.status = ""

    def clear(self):
        self.input = ""
        self.result = ""
        self.status = "Cleared"

    # -----------------------------
    # Evaluation
    # -----------------------------

    def evaluate(self):
        """Evaluate the input line; returns True on success."""
        self.error = None
        if not self.input:
            self.status = E.ERROR_MESSAGES["4001"]
            return False

        try:
            value = MathEngine.parse_and_eval(self.input)
        except E.MathError as e:
            logger.debug("evaluation of %r failed with %s", e.equation, e.code)
            self.error = e
            self.result = ""
            self.status = f"Error: {e.message}"
            return False

        self.result = Formatter.format_number(value, config_manager.fraction_digits(self.settings))
        self.add_history(self.input, self.result)
        self.input = ""
        self.status = "Calculated"
        return True

    def add_history(self, expression, result):
        self.history.append((expression, result))
        overflow = len(self.history) - self.max_history
        if overflow > 0:
            del self.history[:overflow]
            if self.selected is not None and self.selected >= len(self.history):
                self.selected = len(self.history) - 1

    # -----------------------------
    # History navigation (newest first)
    # -----------------------------

    def history_items(self):
        return list(reversed(self.history))

    def selected_entry(self):
        if self.selected is None or not 0 <= self.selected < len(self.history):
            return None
        return self.history[len(self.history) - 1 - self.selected]

    def history_next(self):
        if not self.history:
            return
        if self.selected is None or self.selected >= len(self.history) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def history_prev(self):
        if not self.history:
            return
        if self.selected is None or self.selected == 0:
            self.selected = len(self.history) - 1
        else:
            self.selected -= 1

    def history_top(self):
        if self.history:
            self.selected = 0

    def history_bottom(self):
        if self.history:
            self.selected = len(self.history) - 1

    def select_history(self, index):
        """Select entry ``index`` (newest first) and focus the history."""
        if not 0 <= index < len(self.history):
            return False
        self.selected = index
        self.focus = HISTORY
        return True

    def cycle_focus(self):
        self.focus = FOCUS_ORDER[(FOCUS_ORDER.index(self.focus) + 1) % len(FOCUS_ORDER)]
        return self.focus

    # -----------------------------
    # Clipboard
    # -----------------------------

    def paste(self, text=None):
        """Append filtered clipboard text (or ``text``) to the input."""
        if text is None:
            try:
                text = pyperclip.paste()
            except pyperclip.PyperclipException as e:
                logger.warning("%s (%s)", E.ERROR_MESSAGES["6001"], e)
                text = ""

        if not text:
            self.status = E.ERROR_MESSAGES["4002"]
            return

        filtered = filter_paste(text)
        self.input += filtered
        self.status = f"Pasted: {filtered}"

        if self.settings.get("after_paste_enter", False):
            self.evaluate()

    def yank(self, source=None):
        """Copy input, result or the selected history result to the clipboard."""
        if source is None:
            source = self.focus

        if source == INPUT:
            text = self.input
        elif source == RESULT:
            text = self.result
        else:
            entry = self.selected_entry()
            text = entry[1] if entry else ""

        if not text:
            self.status = E.ERROR_MESSAGES["4003"]
            return False

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("%s (%s)", E.ERROR_MESSAGES["6001"], e)
            self.status = "Yank failed"
            return False

        self.status = f"Yanked: {text}"
        return True
