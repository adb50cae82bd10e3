"""
Styles and themes for FlowTree.

Dark chrome around the explorer canvas. The canvas itself is painted
with the node colors; only the floating controls are styled here.
"""

# Dark theme colors
COLORS = {
    "bg_primary": "#000000",
    "text_primary": "#ffffff",
    "accent_hover": "#bfdbfe",
    "control_bg": "rgba(255, 255, 255, 26)",
    "control_hover": "rgba(255, 255, 255, 51)",
    "control_pressed": "rgba(255, 255, 255, 77)",
    "control_disabled": "rgba(255, 255, 255, 13)",
    "text_disabled": "rgba(255, 255, 255, 100)",
}

DARK_STYLESHEET = f"""
QMainWindow {{
    background-color: {COLORS['bg_primary']};
    color: {COLORS['text_primary']};
    font-family: "Segoe UI", sans-serif;
}}

QPushButton#homeButton {{
    background: transparent;
    color: {COLORS['text_primary']};
    border: none;
    font-size: 28px;
}}
QPushButton#homeButton:hover {{ color: {COLORS['accent_hover']}; }}

QPushButton[navButton="true"] {{
    background-color: {COLORS['control_bg']};
    color: {COLORS['text_primary']};
    border: none;
    font-size: 18px;
    font-weight: bold;
}}
QPushButton[navButton="true"]:hover {{
    background-color: {COLORS['control_hover']};
}}
QPushButton[navButton="true"]:pressed {{
    background-color: {COLORS['control_pressed']};
}}
QPushButton[navButton="true"]:disabled {{
    color: {COLORS['text_disabled']};
    background-color: {COLORS['control_disabled']};
}}

QLabel#focusLabel {{
    background: transparent;
    color: {COLORS['text_primary']};
    padding: 0 8px;
}}
"""


def round_button_style(size: int) -> str:
    """Border radius making a fixed-size nav button circular."""
    return f"border-radius: {size // 2}px;"
