"""
Shared fixtures for FlowTree tests.
"""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from flowtree_core.adapters.tree_loader import build_index
from flowtree_core.ports.surface_port import DrawSurface
from flowtree_app.resources.sample_tree import SAMPLE_TREE


class RecordingSurface(DrawSurface):
    """DrawSurface that records every call for assertions."""

    def __init__(self):
        self.calls: List[Tuple] = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_circle(self, x, y, radius, color, opacity=1.0, shadow_color="", shadow_blur=0.0):
        self.calls.append(("fill_circle", x, y, radius, color, opacity))

    def stroke_circle(self, x, y, radius, color, width, opacity=1.0):
        self.calls.append(("stroke_circle", x, y, radius, color, width, opacity))

    def draw_text(self, x, y, text, color, size, opacity=1.0, bold=True):
        self.calls.append(("draw_text", x, y, text, color, size, opacity))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def sample_index():
    """Four-level example tree (Root -> L1 -> L2 -> L3)."""
    return build_index(SAMPLE_TREE)


@pytest.fixture
def two_leaf_index():
    """Root with two childless children A and B."""
    return build_index({
        "id": "r", "label": "Root", "color": "#111111",
        "children": [
            {"id": "a", "label": "A", "color": "#aa0000"},
            {"id": "b", "label": "B", "color": "#0000bb"},
        ],
    })


@pytest.fixture
def surface():
    return RecordingSurface()
