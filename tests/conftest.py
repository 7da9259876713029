"""
Shared test fixtures for restdoc tests.

This module provides common fixtures used across the unit tests:
- A hand-built two-level command tree
- A fixed date for footer assertions
"""

from datetime import date

import pytest

from restdoc.models import CommandNode, FlagInfo

# ============================================================================
# COMMAND TREE FIXTURES
# ============================================================================


@pytest.fixture
def app_tree():
    """Root "app" (no flags, empty long text) with one runnable child "app sub".

    The child has a required string option --name and the example
    text "app sub --name x".
    """
    root = CommandNode(name="app", short="Root app", long="", runnable=False)
    root.add_child(
        CommandNode(
            name="sub",
            short="Sub command",
            use_line="app sub [flags]",
            example="app sub --name x",
            flags=[FlagInfo(name="name", type_name="string", usage="Name to use", required=True)],
        )
    )
    return root


@pytest.fixture
def fixed_day():
    """Footer date matching the 2-Jan-2006 layout."""
    return date(2006, 1, 2)
