"""
Panel controller.

Tracks which overlay panels are open, whether starter suggestions are shown
and whether the welcome screen is still up.
"""
import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from .response_generator import PanelDirective

logger = logging.getLogger(__name__)


class Panel(str, Enum):
    """Modal overlays the chat can open."""
    CAMERA = "camera"
    EXPERT_CONNECT = "expert_connect"
    ENHANCED_SOIL_TEST = "enhanced_soil_test"
    SOIL_SCANNER = "soil_scanner"
    PEST_DETECTION = "pest_detection"


_DIRECTIVE_PANELS = {
    PanelDirective.OPEN_EXPERT_CONNECT: Panel.EXPERT_CONNECT,
    PanelDirective.OPEN_ENHANCED_SOIL_TEST: Panel.ENHANCED_SOIL_TEST,
    PanelDirective.OPEN_PEST_DETECTION: Panel.PEST_DETECTION,
}

# Welcome screen options that open a panel instead of prefilling the input.
_WELCOME_PANELS = {
    "connect-expert": Panel.EXPERT_CONNECT,
    "enhanced-soil-test": Panel.ENHANCED_SOIL_TEST,
}

SUGGESTION_MESSAGE_LIMIT = 3


class PanelController:
    """Boolean UI flags for one conversation."""
    
    def __init__(self):
        self._open: Dict[Panel, bool] = {panel: False for panel in Panel}
        self.suggestions = True
        self.welcome_screen = True
    
    def open(self, panel: Panel) -> None:
        self._open[Panel(panel)] = True
    
    def close(self, panel: Panel) -> None:
        self._open[Panel(panel)] = False
    
    def is_open(self, panel: Panel) -> bool:
        return self._open[Panel(panel)]
    
    def apply(self, directives: Iterable[PanelDirective]) -> None:
        """
        Apply the UI directives attached to a bot response.
        
        :param directives: Directives from the response generator
        """
        for directive in directives:
            if directive == PanelDirective.SHOW_SUGGESTIONS:
                self.suggestions = True
            else:
                panel = _DIRECTIVE_PANELS[directive]
                logger.debug(f"Opening panel '{panel.value}'")
                self.open(panel)
    
    def hide_suggestions(self) -> None:
        self.suggestions = False
    
    def should_show_suggestions(self, message_count: int) -> bool:
        """Suggestions only appear at the start of a conversation."""
        return self.suggestions and message_count < SUGGESTION_MESSAGE_LIMIT
    
    def start_chat(self) -> None:
        self.welcome_screen = False
    
    def select_welcome_option(self, option: str) -> Optional[str]:
        """
        Handle a welcome screen choice.
        
        :param option: Option slug, e.g. "soil-testing" or "connect-expert"
        :return: Text to prefill the chat input with, or None if a panel opened
        """
        self.welcome_screen = False
        panel = _WELCOME_PANELS.get(option)
        if panel is not None:
            self.open(panel)
            return None
        return f"I am interested in {option.replace('-', ' ', 1)}."
    
    def snapshot(self) -> Dict[str, bool]:
        """Current flags keyed by name."""
        flags = {panel.value: is_open for panel, is_open in self._open.items()}
        flags["suggestions"] = self.suggestions
        flags["welcome_screen"] = self.welcome_screen
        return flags
