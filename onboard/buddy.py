"""Onboarding buddy setup.

Shared by the welcome screen and the menu.
"""

from onboard.progress.store import ProgressStore
from onboard.prompt import Ask
from onboard.steps.answers import is_yes


def setup_buddy(store: ProgressStore, ask: Ask) -> bool:
    """
    Ask for (or update) the buddy's name and contact.

    Returns:
        True if buddy details were saved
    """
    record = store.load()

    print(f"\n{'=' * 61}")
    print("\nOnboarding Buddy Setup\n")
    print("Your buddy is an experienced team member who can help you")
    print("throughout your onboarding journey.\n")

    if record.buddy:
        print("Current Buddy:")
        print(f"   Name:    {record.buddy.name}")
        print(f"   Contact: {record.buddy.contact}\n")
        if not is_yes(ask("Do you want to update buddy information? (y/n): ")):
            print("\nBuddy information unchanged.\n")
            return False
        print()

    name = ask("Enter your buddy's name: ").strip()
    if not name:
        print("\nBuddy name is required.\n")
        return False

    contact = ask("Enter their email: ").strip()
    if not contact:
        print("\nContact information is required.\n")
        return False

    store.set_buddy(name, contact)

    print("\nBuddy information saved!")
    print(f"\nYou can reach out to {name} at {contact}")
    print("whenever you need help or have questions.\n")
    return True
