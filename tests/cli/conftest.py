"""Shared fixtures for CLI tests."""

import pytest

BOARD_YAML = """\
groups:
  - id: todo
    name: To do
    items:
      - id: "1"
        title: First card
      - id: "2"
        title: Second card
  - id: doing
    name: Doing
    items: ["3"]
  - id: done
    name: Done
"""


@pytest.fixture
def board_file(tmp_path):
    """A board description with 3 groups and 3 cards."""
    path = tmp_path / "board.yaml"
    path.write_text(BOARD_YAML)
    return path
