"""
Persistence layer: best-effort logging to the conversation service.
"""
from .conversation_client import ConversationClient, SaveResult

__all__ = ["ConversationClient", "SaveResult"]
