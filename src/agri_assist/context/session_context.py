"""
Conversation context domain objects.

Pure domain models - no Flask, no HTTP, no UI logic.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from ..interaction.intent_types import IntentType

DEFAULT_MAX_QUERIES = 10


@dataclass
class ConversationContext:
    """State folded forward across turns of one conversation."""
    last_intent: Optional[IntentType] = None
    soil_type: Optional[str] = None
    max_queries: int = DEFAULT_MAX_QUERIES
    _queries: Deque[str] = field(default_factory=deque, repr=False)

    @property
    def previous_queries(self) -> List[str]:
        """Most recent user texts, oldest first."""
        return list(self._queries)

    def record_turn(self, intent: IntentType, text: str) -> None:
        """Fold a classified user message into the context."""
        self.last_intent = intent
        self._queries.append(text)
        while len(self._queries) > self.max_queries:
            self._queries.popleft()

    def record_soil(self, soil_type: str) -> None:
        """Remember the soil type reported by the scanner."""
        self.soil_type = soil_type
        self.last_intent = IntentType.SOIL_ANALYSIS

    def has_soil_type(self) -> bool:
        return bool(self.soil_type)

    def clear(self) -> None:
        self.last_intent = None
        self.soil_type = None
        self._queries.clear()

    def to_dict(self) -> dict:
        return {
            "last_intent": self.last_intent.value if self.last_intent else None,
            "soil_type": self.soil_type,
            "previous_queries": self.previous_queries,
        }
