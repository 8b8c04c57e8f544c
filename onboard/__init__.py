"""Onboarding Checklist - Guided access provisioning for new team members

Philosophy:
    Onboarding should feel like a checklist you can walk away from.
    Access requests take days, so every run picks up where the last one
    stopped and only asks about what is still missing.

Components:
    progress/: Progress record, JSON-backed store, read-side presenter
    steps/: Step registry, answer parsing, guidance content, step runner
    orchestrator.py: Runs the checklist in order, halts on the first pending step
    menu.py: Interactive menu (continue, progress, buddy, undo, reset)
    cli.py: Command line entry point
"""

from pathlib import Path

__version__ = "1.0.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
CONFIG_PATH = ARGS_DIR / "onboard.yaml"
DEFAULT_PROGRESS_PATH = Path.home() / ".onboard-progress.json"

__all__ = [
    "__version__",
    "PROJECT_ROOT",
    "ARGS_DIR",
    "CONFIG_PATH",
    "DEFAULT_PROGRESS_PATH",
]
