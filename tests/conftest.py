"""Pytest configuration and fixtures for sway-nav tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Make the sway_nav package and the shared fixtures importable without installation
repo_root = Path(__file__).parent.parent
tests_root = Path(__file__).parent
for path in (repo_root, tests_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fixtures.mock_ipc import tree_reply  # noqa: E402
from fixtures.sample_trees import letter_tree, nested_tabbed_tree  # noqa: E402


@pytest.fixture
def tree():
    """Letter tree with the focused leaf 'f' and a floating subtree 'g'."""
    return letter_tree()


@pytest.fixture
def tabbed_tree():
    """Focused terminal nested in tabbed > tabbed > splith > output."""
    return nested_tabbed_tree()


@pytest.fixture
def mock_i3_connection():
    """Create mock i3ipc connection replying to GET_TREE and RUN_COMMAND."""
    mock = MagicMock()
    mock.get_tree.return_value = tree_reply(nested_tabbed_tree().model_dump(mode="json", by_alias=True))
    mock.command.return_value = []
    return mock

