"""
Ports (interfaces) for FlowTree.

These define the contracts that adapters must implement.
This enables dependency injection and testing with recorders.
"""

from .surface_port import DrawSurface

__all__ = ["DrawSurface"]
