# config_manager.py
"""Load and save user settings.

Settings live in ``config.json`` at the project root, their human readable
descriptions in ``ui_strings.json``. ``KALTUI_CONFIG`` points to a different
settings file. Missing or unreadable files fall back to DEFAULT_SETTINGS so
the calculator always starts.
"""
import os
import json
import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ui_strings = PROJECT_ROOT / "ui_strings.json"

DEFAULT_SETTINGS = {
    "max_history": 1000,
    "fraction_digits": 10,
    "after_paste_enter": False,
    "debug": False,
}

# Fewer fractional digits would truncate results visibly
MIN_FRACTION_DIGITS = 10


def config_path():
    """Return the settings file in use (environment override first)."""
    override = os.environ.get("KALTUI_CONFIG")
    if override:
        return Path(override)
    return PROJECT_ROOT / "config.json"


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("%s not found, using defaults", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("%s%s (%s)", E.ERROR_MESSAGES["5001"], path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("%s%s (not an object)", E.ERROR_MESSAGES["5001"], path)
        return {}
    return data


def load_setting_value(key_value):
    """Return one setting, or the merged settings dict for ``"all"``."""
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_path()))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = _read_json(ui_strings)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, "")


def save_setting(settings_dict):
    """Validate and write ``settings_dict``; returns what was written."""
    for key, default in DEFAULT_SETTINGS.items():
        if key in settings_dict and type(settings_dict[key]) is not type(default):
            raise E.ConfigurationError(E.ERROR_MESSAGES["5003"] + key, code="5003")

    path = config_path()
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        raise E.ConfigurationError(E.ERROR_MESSAGES["5002"] + str(path), code="5002") from e


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def history_limit(settings=None):
    if settings is None:
        settings = load_setting_value("all")
    limit = settings.get("max_history")
    if not _is_int(limit) or limit < 1:
        return DEFAULT_SETTINGS["max_history"]
    return limit


def fraction_digits(settings=None):
    if settings is None:
        settings = load_setting_value("all")
    digits = settings.get("fraction_digits")
    if not _is_int(digits):
        return DEFAULT_SETTINGS["fraction_digits"]
    return max(digits, MIN_FRACTION_DIGITS)


if __name__ == "__main__":
    print(load_setting_value("all"))
    print(load_setting_description("all"))
