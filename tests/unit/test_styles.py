"""
Tests for the dark chrome stylesheet.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from flowtree_app.resources.styles import COLORS, DARK_STYLESHEET, round_button_style


class TestStyles:
    """Test the stylesheet built from the color table."""

    def test_every_color_is_used(self):
        """Each theme color ends up in the stylesheet."""
        for name, value in COLORS.items():
            assert value in DARK_STYLESHEET, name

    def test_no_unfilled_placeholders(self):
        """The stylesheet carries plain QSS braces only."""
        assert "{{" not in DARK_STYLESHEET
        assert "COLORS" not in DARK_STYLESHEET

    def test_round_button_radius(self):
        """Radius is half the button size."""
        assert round_button_style(48) == "border-radius: 24px;"
