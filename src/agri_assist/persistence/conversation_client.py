"""
Conversation persistence client.

Best-effort logging of chat messages and scan results to the conversation
service. Failures are logged and swallowed so the chat keeps working when the
service is down.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..memory.message_store import ChatMessage

logger = logging.getLogger(__name__)

CONVERSATION_PATH = "/api/conversation"
SOIL_TEST_PATH = "/api/soil-test"
PEST_DETECTION_PATH = "/api/pest-detection"


@dataclass(frozen=True)
class SaveResult:
    success: bool
    conversation_id: Optional[str] = None


class ConversationClient:
    """
    Fire-and-forget client for the conversation logging endpoint.
    
    The first message of a conversation creates it; the id returned by the
    service is then sent with every later message. With no base URL the
    client does nothing and reports failure.
    """
    
    def __init__(
        self,
        base_url: Optional[str],
        user_id: str = "current-user-id",
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        """
        :param base_url: Service root, e.g. "https://farm.example.org"; None disables
        :param user_id: User identifier sent with every message
        :param timeout: Per-request timeout in seconds
        :param session: Optional requests session (for connection reuse/testing)
        :raises ValueError: If timeout is not positive
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be greater than 0, got {timeout}")
        self._base_url = base_url.rstrip("/") if base_url else None
        self._user_id = user_id
        self._timeout = timeout
        self._http = session or requests.Session()
        self.conversation_id: Optional[str] = None
    
    @property
    def enabled(self) -> bool:
        return self._base_url is not None
    
    def save_message(self, message: ChatMessage) -> SaveResult:
        """
        Persist one chat message.
        
        :param message: Message to log
        :return: SaveResult; never raises for transport or service errors
        """
        payload: Dict[str, Any] = {
            "userId": self._user_id,
            "message": message.content,
            "role": message.role.value,
            "type": message.type.value,
            "image": message.image,
        }
        if self.conversation_id:
            payload["conversationId"] = self.conversation_id
        
        body = self._post(CONVERSATION_PATH, payload)
        if body is None:
            return SaveResult(success=False, conversation_id=self.conversation_id)
        
        if not self.conversation_id and isinstance(body, dict) and body.get("id"):
            self.conversation_id = str(body["id"])
            logger.info(f"Conversation created: {self.conversation_id}")
        
        return SaveResult(success=True, conversation_id=self.conversation_id)
    
    def record_soil_scan(self, result: Dict[str, Any]) -> bool:
        """Log a soil scan result. Returns whether the service accepted it."""
        return self._post(SOIL_TEST_PATH, result) is not None
    
    def record_pest_detection(self, result: Dict[str, Any]) -> bool:
        """Log a pest detection result. Returns whether the service accepted it."""
        return self._post(PEST_DETECTION_PATH, result) is not None
    
    def reset(self) -> None:
        """Forget the current conversation id so the next message starts a new one."""
        self.conversation_id = None
    
    def _post(self, path: str, payload: Dict[str, Any]) -> Optional[Any]:
        """POST JSON and return the decoded body, or None on any failure."""
        if not self.enabled:
            logger.debug(f"Persistence disabled, skipping {path}")
            return None
        
        url = f"{self._base_url}{path}"
        try:
            response = self._http.post(url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error saving to {path}: {str(e)}")
            return None
        
        try:
            return response.json()
        except ValueError:
            # Accepted, but nothing useful came back.
            return {}
