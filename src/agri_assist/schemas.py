from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .memory.message_store import ChatMessage


@dataclass
class ChatResponse:
    """What a surface needs to render after one interaction."""
    messages: List[ChatMessage]
    panels: Dict[str, bool]
    show_suggestions: bool
    suggested_questions: List[str] = field(default_factory=list)
    intent: Optional[str] = None
    prefill: Optional[str] = None
    analysis: Optional[Dict[str, Any]] = None
    latency_ms: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "messages": [m.to_dict() for m in self.messages],
            "panels": self.panels,
            "show_suggestions": self.show_suggestions,
            "suggested_questions": self.suggested_questions if self.show_suggestions else [],
            "intent": self.intent,
            "latency_ms": self.latency_ms,
        }
        if self.prefill is not None:
            result["prefill"] = self.prefill
        if self.analysis is not None:
            result["analysis"] = self.analysis
        return result


@dataclass
class ConversationState:
    """Full snapshot of one conversation."""
    messages: List[ChatMessage]
    context: Dict[str, Any]
    panels: Dict[str, bool]
    show_suggestions: bool
    conversation_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "context": self.context,
            "panels": self.panels,
            "show_suggestions": self.show_suggestions,
            "conversation_id": self.conversation_id,
        }
