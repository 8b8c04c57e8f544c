#!/usr/bin/env python3
"""
Onboarding Command Line Interface

Main entry point for the `onboard` command.

Usage:
    onboard                       # Start or continue onboarding (menu once started)
    onboard progress              # Show the progress checklist
    onboard arch-walkthrough      # Architecture walkthrough only
    onboard faqs                  # Frequently asked questions
    onboard getJenkinsPipelines   # Jenkins pipeline list
    onboard reset                 # Delete all progress
    onboard help                  # Command reference
"""

import argparse
import sys

from onboard import __version__
from onboard.config import OnboardConfig, load_config
from onboard.logging_config import get_logger, setup_logging
from onboard.menu import MenuController, print_reset_result
from onboard.orchestrator import OnboardingOrchestrator
from onboard.progress import presenter
from onboard.progress.store import JsonProgressStore, ProgressStore
from onboard.prompt import Ask, ask as stdin_ask
from onboard.steps.content import (
    ARCHITECTURE_WALKTHROUGH,
    FAQS,
    help_text,
    jenkins_pipelines_text,
)
from onboard.steps.registry import STEPS

logger = get_logger(__name__)


def _banner(config: OnboardConfig) -> None:
    print("\n" + "-" * 58)
    print(f"\n   Welcome to {config.display.team_name} Onboarding!")
    print("   This tool will guide you step by step.")
    print(f"\n   Type `{config.display.command} help` to see all available commands")
    print("\n" + "-" * 58 + "\n")


def cmd_help(config: OnboardConfig, store: ProgressStore) -> int:
    print(help_text(config.display.command, str(config.progress_path())))
    return 0


def cmd_faqs(config: OnboardConfig, store: ProgressStore) -> int:
    print(FAQS)
    return 0


def cmd_arch_walkthrough(config: OnboardConfig, store: ProgressStore) -> int:
    print(ARCHITECTURE_WALKTHROUGH)
    return 0


def cmd_jenkins_pipelines(config: OnboardConfig, store: ProgressStore) -> int:
    print(jenkins_pipelines_text())
    return 0


def cmd_progress(config: OnboardConfig, store: ProgressStore) -> int:
    print(presenter.render_progress(store.load(), store.clock(), config.display.bar_length))
    return 0


def cmd_reset(config: OnboardConfig, store: ProgressStore) -> int:
    print_reset_result(store.reset())
    return 0


COMMANDS = {
    "help": cmd_help,
    "faqs": cmd_faqs,
    "arch-walkthrough": cmd_arch_walkthrough,
    "getJenkinsPipelines": cmd_jenkins_pipelines,
    "progress": cmd_progress,
    "reset": cmd_reset,
}


def run_interactive(config: OnboardConfig, store: ProgressStore, ask: Ask) -> int:
    """No command given: resume with the menu, or start the checklist from scratch."""
    _banner(config)
    menu = MenuController(store, ask, config=config)

    record = store.load()
    done = presenter.completed_count(record)

    if 0 < done < len(STEPS):
        menu.run()
    elif done == len(STEPS):
        print("\nYou've already completed all onboarding steps!\n")
        menu.run()
    else:
        result = OnboardingOrchestrator(store, ask, config=config).run()
        if result.return_to_menu:
            menu.run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onboard",
        description="Interactive onboarding checklist",
        add_help=False,
    )
    parser.add_argument("command", nargs="?", help="Command to run (see `onboard help`)")
    parser.add_argument("--help", "-h", action="store_true", help="Show help and exit")
    parser.add_argument("--version", "-V", action="store_true", help="Show version and exit")
    return parser


def main(argv: list[str] | None = None, ask: Ask | None = None, store: ProgressStore | None = None) -> int:
    """Main CLI entry point."""
    setup_logging()

    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    config = load_config()
    if store is None:
        store = JsonProgressStore(config.progress_path())
    ask = ask or stdin_ask

    if args.version:
        print(f"onboard version {__version__}")
        return 0

    if args.help:
        return cmd_help(config, store)

    command = args.command or (extra[0] if extra else None)

    try:
        if command is None:
            return run_interactive(config, store, ask)

        handler = COMMANDS.get(command)
        if handler is None:
            print(f"\nUnknown command: '{command}'\n")
            return cmd_help(config, store)
        return handler(config, store)
    except KeyboardInterrupt:
        print("\n\nInterrupted. Your progress up to the last completed step is saved.\n")
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
