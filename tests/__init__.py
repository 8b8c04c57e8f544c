"""Onboarding Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - progress/: Record model, stores, presenter derivations
  - steps/: Answer parsing, registry, step runner
  - flow/: Orchestrator and menu
  - cli/: Command line entry point and configuration
- integration/: Full runs against a real progress file

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/progress/
"""
