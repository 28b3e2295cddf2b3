"""
Message store.

Ordered, append-only record of the chat turns in one conversation.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class Role(str, Enum):
    USER = "user"
    BOT = "bot"


class MessageType(str, Enum):
    """How a message is rendered: plain text or with an embedded form."""
    TEXT = "text"
    SOIL_FORM = "soil-form"
    AID_FORM = "aid-form"


@dataclass(frozen=True)
class ChatMessage:
    id: str
    content: str
    role: Role
    type: MessageType = MessageType.TEXT
    timestamp: datetime = field(default_factory=datetime.now)
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "role": self.role.value,
            "type": self.type.value,
            "timestamp": self.timestamp.isoformat(),
            "image": self.image,
        }


class MessageStore:
    """
    Append-only sequence of chat messages.
    
    Key traits:
    - Insertion order is display order
    - Messages are never edited or removed individually
    - Ids are unique and increasing within a store
    """
    
    def __init__(self):
        self._messages: List[ChatMessage] = []
        self._last_id = 0
    
    def add(
        self,
        content: str,
        role: Role,
        type: MessageType = MessageType.TEXT,
        image: Optional[str] = None,
    ) -> ChatMessage:
        """
        Create a message and append it.
        
        :param content: Message text
        :param role: Who sent it
        :param type: Rendering type
        :param image: Optional image data URL
        :return: The stored ChatMessage
        """
        message = ChatMessage(
            id=str(self._last_id + 1),
            content=content,
            role=Role(role),
            type=MessageType(type),
            image=image,
        )
        self._messages.append(message)
        self._last_id += 1
        return message
    
    def append(self, message: ChatMessage) -> None:
        """
        Append an already built message.
        
        :param message: Message whose numeric id is above every id issued so far
        :raises ValueError: If the id is not numeric or does not increase
        """
        try:
            message_id = int(message.id)
        except ValueError:
            raise ValueError(f"Message id must be numeric, got {message.id!r}")
        if message_id <= self._last_id:
            raise ValueError(
                f"Message id {message.id} must be greater than the last id {self._last_id}"
            )
        self._messages.append(message)
        self._last_id = message_id
    
    def messages(self) -> List[ChatMessage]:
        """All messages in order (a copy)."""
        return list(self._messages)
    
    def last(self) -> Optional[ChatMessage]:
        return self._messages[-1] if self._messages else None
    
    def clear(self) -> None:
        self._messages.clear()
    
    def __len__(self) -> int:
        return len(self._messages)
    