"""
Tests for hit-testing and click/control dispatch.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from flowtree_core.domain.enums import NavAction
from flowtree_core.domain.models import AtRoot, Drilling, PlacedNode, Viewing
from flowtree_core.services.input_dispatcher import InputDispatcher, hit_test
from flowtree_core.services.layout import LayoutEngine
from flowtree_core.services.navigation import NavigationStateMachine


def make_dispatcher(index, state=None):
    layout = LayoutEngine(index)
    nav = NavigationStateMachine(index, layout, state)
    return InputDispatcher(nav), nav, layout


class TestHitTest:
    """Test circle hit-testing."""

    def test_inside_and_on_edge(self, sample_index):
        """Points within or on the radius hit."""
        placed = [PlacedNode(sample_index.root, 100, 100)]
        assert hit_test(placed, 100, 100, 60) is placed[0]
        assert hit_test(placed, 160, 100, 60) is placed[0]

    def test_outside(self, sample_index):
        """Points past the radius miss."""
        placed = [PlacedNode(sample_index.root, 100, 100)]
        assert hit_test(placed, 143, 143, 60) is None

    def test_first_in_list_wins(self, sample_index):
        """Overlaps resolve by list order, not z-index."""
        low = sample_index.find_by_id("n10")   # z 70
        high = sample_index.find_by_id("n1")   # z 100
        placed = [PlacedNode(low, 100, 100), PlacedNode(high, 110, 100)]
        assert hit_test(placed, 105, 100, 60).id == "n10"


class TestClick:
    """Test click dispatch."""

    def test_click_node_with_children_drills(self, sample_index):
        """Clicking the root at the root reveals its children."""
        dispatcher, nav, layout = make_dispatcher(sample_index)
        placed = layout.layout(nav.state, 1200, 800)
        assert dispatcher.click(placed, 600, 400, 60)
        assert nav.state == Drilling("n1", 1)

    def test_click_leaf_is_noop(self, sample_index):
        """Leaves do nothing when clicked."""
        dispatcher, nav, layout = make_dispatcher(sample_index, Viewing("n4", 2, "n4"))
        placed = layout.layout(nav.state, 1200, 800)
        assert not dispatcher.click(placed, placed[1].x, placed[1].y, 60)
        assert nav.state == Viewing("n4", 2, "n4")

    def test_click_background_collapses(self, sample_index):
        """Empty space steps back toward the root."""
        dispatcher, nav, layout = make_dispatcher(sample_index, Viewing("n1", 1, "n1"))
        placed = layout.layout(nav.state, 1200, 800)
        assert dispatcher.click(placed, 10, 10, 60)
        assert nav.state == AtRoot()


class TestPress:
    """Test control buttons."""

    def test_press_maps_to_transitions(self, sample_index):
        """Each control maps onto its transition."""
        dispatcher, nav, _ = make_dispatcher(sample_index)
        assert dispatcher.press(NavAction.ZOOM_IN)
        nav.complete_drill()
        assert dispatcher.press(NavAction.NEXT)
        assert nav.focused_index == 1
        assert dispatcher.press(NavAction.PREVIOUS)
        assert dispatcher.press(NavAction.ZOOM_OUT)
        assert nav.state == AtRoot()
        assert not dispatcher.press(NavAction.HOME)
