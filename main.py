# Main.py
""""" Entry point for the kaltui calculator.

   Responsibilities:
   - Detect run mode (script vs installed package)
   - Verify required files exist in development mode
   - Load configuration, set up logging and start the console UI

"""""
import sys
import logging
from pathlib import Path

from kaltui import config_manager as config_manager, UI as UI


PROJECT_ROOT = Path(__file__).resolve().parent



def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "kaltui"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "Session.py",
        modules_dir / "MathEngine.py",
        modules_dir / "Formatter.py",
        modules_dir / "config_manager.py",
        modules_dir / "error.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():

    """
    Load configuration and start the UI.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    setup_logging(all_settings.get("debug", False))
    logging.getLogger(__name__).debug("Config loaded: %s", all_settings)

    # Delegate control to the UI layer; the UI owns the input loop.
    return UI.main()


if __name__ == "__main__":
    if "--no-check" not in sys.argv:
        check_files_exist()
    sys.exit(main())
