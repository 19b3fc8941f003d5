"""kaltui: apostrophe-grouped calculator engine with a console front end."""

__version__ = "0.1.0"
