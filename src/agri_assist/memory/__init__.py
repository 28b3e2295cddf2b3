"""
Memory layer for the chat transcript.
"""
from .message_store import ChatMessage, MessageStore, MessageType, Role

__all__ = ["ChatMessage", "MessageStore", "MessageType", "Role"]
