"""
FlowTree App - PyQt6 desktop explorer built on flowtree_core.
"""

__version__ = "0.1.0"
