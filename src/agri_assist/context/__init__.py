"""
Conversation context domain objects.
"""
from .session_context import ConversationContext
from .context_manager import SessionContextManager

__all__ = ["ConversationContext", "SessionContextManager"]
