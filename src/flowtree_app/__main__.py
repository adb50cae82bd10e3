"""
Main entry point for FlowTree application.

Usage:
    python -m flowtree_app [--tree TREE.json] [--infinite-zoom] [--debug]
    flowtree  (if installed)
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger("flowtree_app")

CRASH_LOG = Path.cwd() / "crash_log.txt"


def setup_exception_hook(log_file: Path = CRASH_LOG):
    """Setup global exception hook to catch Qt exceptions."""

    def exception_hook(exctype, value, tb):
        # Write to log file
        error_msg = ''.join(traceback.format_exception(exctype, value, tb))
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"\n{'='*60}\n")
            f.write(f"UNHANDLED EXCEPTION at {datetime.now()}\n")
            f.write(f"{'='*60}\n")
            f.write(error_msg)
            f.write("\n")

        logger.critical(f"Unhandled exception (details in {log_file}):\n{error_msg}")

        # Call default handler
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = exception_hook


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flowtree", description="Explore a hierarchy layer by layer")
    parser.add_argument("--tree", type=Path, default=None,
                        help="JSON tree file (defaults to the bundled sample)")
    parser.add_argument("--infinite-zoom", action="store_true",
                        help="Keep enlarging nodes when zooming past the deepest layer")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Launch the FlowTree application."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    # Setup exception hook first
    setup_exception_hook()

    # Ensure src is in path for development
    src_path = Path(__file__).parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from flowtree_core.adapters.tree_loader import build_index, load_tree
    from flowtree_core.domain.settings import ExplorerSettings

    if args.tree is not None:
        index = load_tree(args.tree)
    else:
        from flowtree_app.resources.sample_tree import SAMPLE_TREE
        index = build_index(SAMPLE_TREE)
    logger.info(f"Exploring {len(index)} nodes from root {index.root.label!r}")

    from PyQt6.QtWidgets import QApplication
    from PyQt6.QtCore import Qt

    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv[:1])
    app.setStyle("Fusion")
    app.setApplicationName("FlowTree")

    # Import and apply dark theme
    from flowtree_app.resources.styles import DARK_STYLESHEET
    app.setStyleSheet(DARK_STYLESHEET)

    # Import and create main window
    from flowtree_app.views.main_window import MainWindow

    window = MainWindow(index, ExplorerSettings(infinite_zoom=args.infinite_zoom))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
