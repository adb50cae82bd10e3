"""
Tests for ExplorerVM signal wiring.

Requires PyQt6; skipped otherwise. Only a QCoreApplication is created, so
no display is needed.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

pytest.importorskip("PyQt6.QtCore")

from PyQt6.QtCore import QCoreApplication

from flowtree_core.domain.models import AtRoot, Viewing
from flowtree_app.viewmodels.explorer_vm import ExplorerVM


@pytest.fixture(scope="module")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def vm(qapp, sample_index):
    model = ExplorerVM(sample_index)
    model.resize(1200, 800)
    return model


def run_animation(vm):
    """Drive the frame timer by hand until it stops."""
    while vm.animating:
        vm._on_tick()


class TestExplorerVM:
    """Test ViewModel commands and signals."""

    def test_zoom_in_emits_and_animates(self, vm):
        """Zoom-in starts the animation and publishes state and background."""
        states, backgrounds = [], []
        vm.state_changed.connect(lambda: states.append(True))
        vm.background_changed.connect(backgrounds.append)

        vm.zoom_in()
        assert vm.animating
        assert states
        assert backgrounds == ["#2563eb"]

        run_animation(vm)
        assert vm.session.state == Viewing("n1", 1, "n1")
        assert vm.focus_label == "1 / 2"
        assert vm.can_zoom_out

    def test_noop_command_emits_nothing(self, vm):
        """Commands that change nothing stay silent."""
        states = []
        vm.state_changed.connect(lambda: states.append(True))
        vm.zoom_out()
        vm.focus_next()
        assert states == []

    def test_background_emitted_only_on_change(self, vm):
        """Focus moves keep the background and do not re-emit it."""
        vm.zoom_in()
        run_animation(vm)
        backgrounds = []
        vm.background_changed.connect(backgrounds.append)
        vm.focus_next()
        assert backgrounds == []
        vm.home()
        assert backgrounds == ["#000"]
        assert vm.session.state == AtRoot()

    def test_resize_requests_repaint(self, vm):
        """Resizing asks the canvas to repaint."""
        frames = []
        vm.frame_changed.connect(lambda: frames.append(True))
        vm.resize(800, 600)
        assert frames
        assert [(p.x, p.y) for p in vm.session.placed] == [(400, 300)]

    def test_click_drills(self, vm):
        """A click on the root drills in."""
        vm.click(600, 400)
        assert vm.animating
        run_animation(vm)
        assert vm.zoom_level == 1
