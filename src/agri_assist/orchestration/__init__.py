"""
Orchestration layer: one ChatOrchestrator per conversation.
"""
from .chat_orchestrator import ChatOrchestrator, ChatTurn

__all__ = ["ChatOrchestrator", "ChatTurn"]
