"""Page widgets."""

from .center_panel import CenterPanel
from .side_panel import LeftPanel, RightPanel, SidePanel

__all__ = ["CenterPanel", "LeftPanel", "RightPanel", "SidePanel"]
