"""
Domain models (DTOs) for FlowTree.

These are pure data classes with no Qt or drawing dependencies.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .enums import ViewPhase


@dataclass(frozen=True)
class FlowNode:
    """One entry in the hierarchy being explored."""
    id: str
    label: str
    level: int                   # Depth from root (root = 0)
    color: str                   # Fill identity, e.g. "#C41E3A"
    z_index: int = 0             # Intended draw priority (not enforced)
    parent_id: Optional[str] = None
    child_ids: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def has_children(self) -> bool:
        return len(self.child_ids) > 0


@dataclass(frozen=True)
class PlacedNode:
    """A node annotated with screen coordinates for one layout pass."""
    node: FlowNode
    x: float
    y: float

    @property
    def id(self) -> str:
        return self.node.id


# -----------------------------------------------------------------------------
# View state variants
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AtRoot:
    """Only the root is displayed; nothing is selected."""
    focused_index: int = 0

    @property
    def phase(self) -> ViewPhase:
        return ViewPhase.AT_ROOT

    @property
    def pivot_id(self) -> Optional[str]:
        return None  # Root

    @property
    def selected_id(self) -> Optional[str]:
        return None

    @property
    def zoom_level(self) -> int:
        return 0

    @property
    def show_children(self) -> bool:
        return False

    @property
    def animating(self) -> bool:
        return False


@dataclass(frozen=True)
class Viewing:
    """
    A layer below the root is displayed.

    The visible layer is the children of ``selected_id`` when set, else of
    ``pivot_id`` (or its siblings when the pivot is a leaf).
    """
    pivot_id: str
    zoom_level: int
    selected_id: Optional[str] = None
    focused_index: int = 0

    @property
    def phase(self) -> ViewPhase:
        return ViewPhase.VIEWING

    @property
    def show_children(self) -> bool:
        return self.selected_id is not None

    @property
    def animating(self) -> bool:
        return False


@dataclass(frozen=True)
class Drilling:
    """Forward animation into ``to_id``'s children."""
    to_id: str
    zoom_level: int              # Already incremented
    focused_index: int = 0

    @property
    def phase(self) -> ViewPhase:
        return ViewPhase.DRILLING

    @property
    def pivot_id(self) -> str:
        return self.to_id

    @property
    def selected_id(self) -> str:
        return self.to_id

    @property
    def show_children(self) -> bool:
        return False

    @property
    def animating(self) -> bool:
        return True


ViewState = Union[AtRoot, Viewing, Drilling]


@dataclass(frozen=True)
class AnimationFrame:
    """Interpolated drill-in progress handed to the renderer."""
    scale: float = 1.0           # Pivot grows
    fade: float = 1.0            # Pivot fades out
    children_scale: float = 1.0  # Children grow in from the pivot's position
    children_fade: float = 1.0
    finished: bool = True


# Frame used whenever no drill-in is running
IDLE_FRAME = AnimationFrame()
