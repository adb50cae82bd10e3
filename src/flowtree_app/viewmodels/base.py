"""
Base ViewModel class for FlowTree MVVM architecture.

Provides the foundation for the explorer ViewModel with:
- PyQt6 signal support for UI binding
- Change-only notification for cached values
"""

from typing import Optional, Any, Dict
from PyQt6.QtCore import QObject, pyqtBoundSignal


class BaseViewModel(QObject):
    """
    Base class for ViewModels.

    Pattern:
    - Properties read through to a headless session/service
    - Commands as methods
    - No widget references (UI-agnostic)
    - Signals fire only when a derived value actually changes
    """

    def __init__(self, parent: Optional[QObject] = None):
        """
        Initialize the ViewModel.

        Args:
            parent: Optional parent QObject for Qt memory management
        """
        super().__init__(parent)
        self._last_values: Dict[str, Any] = {}

    def _notify_if_changed(self, key: str, value: Any, signal: pyqtBoundSignal) -> bool:
        """
        Emit ``signal(value)`` when ``value`` differs from the last one seen for ``key``.

        Returns:
            True if the signal was emitted
        """
        if key in self._last_values and self._last_values[key] == value:
            return False
        self._last_values[key] = value
        signal.emit(value)
        return True
