"""
Session context manager.

Manages ConversationContext instances per session ID.
"""
from typing import Dict
from .session_context import ConversationContext, DEFAULT_MAX_QUERIES


class SessionContextManager:
    """
    Manages conversation context per session ID.
    
    Purpose:
    - Single source of truth for conversational state
    - Isolate context per user/session
    """
    
    def __init__(self, max_queries: int = DEFAULT_MAX_QUERIES):
        self._contexts: Dict[str, ConversationContext] = {}
        self._max_queries = max_queries
    
    def get_context(self, session_id: str) -> ConversationContext:
        """
        Get or create context for a session.
        
        :param session_id: Session identifier
        :return: ConversationContext instance
        """
        if session_id not in self._contexts:
            self._contexts[session_id] = ConversationContext(max_queries=self._max_queries)
        return self._contexts[session_id]
    
    def clear_context(self, session_id: str) -> None:
        """Clear context for a session."""
        if session_id in self._contexts:
            self._contexts[session_id].clear()
