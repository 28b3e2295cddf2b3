"""
Interaction layer for intent routing, response generation and UI state.

Sits between the surfaces (CLI/Flask) and the chat orchestrator, providing
deterministic classification without any model calls.
"""
from .intent_types import IntentType
from .intent_router import IntentRouter
from .response_generator import BotResponse, PanelDirective, generate_response
from .panel_controller import Panel, PanelController

__all__ = [
    "IntentType",
    "IntentRouter",
    "BotResponse",
    "PanelDirective",
    "generate_response",
    "Panel",
    "PanelController",
]
