"""
ViewModels for FlowTree app.

MVVM architecture separating navigation logic from UI:
- ViewModels handle state and commands
- Views (Qt widgets) handle painting and user input
- The headless session handles layout, animation and transitions
"""

from .base import BaseViewModel
from .explorer_vm import ExplorerVM

__all__ = [
    "BaseViewModel",
    "ExplorerVM",
]
