"""
Chat orchestrator.

Drives one conversation: classifies each message, generates the reply, folds
the context forward, appends to the transcript, logs to the persistence
service and updates the UI panels.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..analysis.pest_detector import PestDetectionResult
from ..analysis.soil_scanner import SoilAnalysis
from ..context.session_context import ConversationContext
from ..interaction.intent_router import IntentRouter
from ..interaction.intent_types import IntentType
from ..interaction.panel_controller import Panel, PanelController
from ..interaction.response_generator import generate_response
from ..memory.message_store import ChatMessage, MessageStore, MessageType, Role
from ..persistence.conversation_client import ConversationClient

logger = logging.getLogger(__name__)

IMAGE_CAPTURED_TEXT = "I've taken a photo for analysis."
IMAGE_QUESTION_TEXT = "What would you like me to analyze in this image?"
IMAGE_OPTIONS_TEXT = "Please type 'soil' for soil analysis or 'pest' for pest detection."


@dataclass
class ChatTurn:
    """Messages appended by one interaction, in order."""
    messages: List[ChatMessage] = field(default_factory=list)
    intent: Optional[IntentType] = None


class ChatOrchestrator:
    """
    Orchestrates a single conversation.
    
    Write path: user text → router → generator → context → transcript →
    persistence (best effort) → panels.
    """
    
    def __init__(
        self,
        context: ConversationContext,
        client: ConversationClient,
        store: Optional[MessageStore] = None,
        panels: Optional[PanelController] = None,
        router: Optional[IntentRouter] = None,
    ):
        """
        :param context: ConversationContext folded forward across turns
        :param client: Persistence client (failures are swallowed)
        :param store: Transcript, created empty if not given
        :param panels: UI flags, created with defaults if not given
        :param router: Intent router
        """
        self.context = context
        self.client = client
        self.store = store or MessageStore()
        self.panels = panels or PanelController()
        self._router = router or IntentRouter()
    
    def handle_user_message(self, text: str) -> ChatTurn:
        """
        Process one typed message.
        
        Blank input is ignored and leaves every piece of state untouched.
        
        :param text: Raw user text
        :return: ChatTurn with the user message and the bot reply
        """
        if not text or not text.strip():
            return ChatTurn()
        
        turn = ChatTurn()
        turn.messages.append(self._post(text, Role.USER))
        self.panels.hide_suggestions()
        
        intent = self._router.route(text)
        response = generate_response(intent, text, self.context)
        self.context.record_turn(intent, text)
        logger.info(f"Routed message - intent: {intent.value}")
        
        turn.messages.append(self._post(response.content, Role.BOT, response.type))
        self.panels.apply(response.directives)
        turn.intent = intent
        return turn
    
    def handle_image_capture(self, image: str) -> ChatTurn:
        """
        Add a captured photo to the chat and ask what to analyze.
        
        :param image: Image as a data URL
        """
        turn = ChatTurn()
        turn.messages.append(self._post(IMAGE_CAPTURED_TEXT, Role.USER, image=image))
        turn.messages.append(self._post(IMAGE_QUESTION_TEXT, Role.BOT))
        turn.messages.append(self._post(IMAGE_OPTIONS_TEXT, Role.BOT))
        self.panels.close(Panel.CAMERA)
        return turn
    
    def handle_soil_detected(self, analysis: SoilAnalysis) -> ChatTurn:
        """
        Report a soil scan in the chat and remember the soil type.
        
        :param analysis: Result from the soil scanner with profile details
        """
        turn = ChatTurn(intent=IntentType.SOIL_ANALYSIS)
        turn.messages.append(self._post(
            f"Based on the soil analysis, I've detected {analysis.label} soil with "
            f"{analysis.color} color. This soil has {analysis.fertility} fertility and "
            f"{analysis.organic_matter} organic matter content.",
            Role.BOT,
        ))
        recommendations = "\n".join(analysis.recommendations)
        turn.messages.append(self._post(
            f"Recommendations for your {analysis.label} soil:\n{recommendations}",
            Role.BOT,
        ))
        self.context.record_soil(analysis.soil_type)
        self.panels.close(Panel.SOIL_SCANNER)
        return turn
    
    def handle_pest_detected(self, result: PestDetectionResult) -> ChatTurn:
        """
        Report an identified pest with its damage and treatments.
        
        :param result: Result from the pest detector
        """
        turn = ChatTurn()
        turn.messages.append(self._post(
            f"I've identified {result.pest_name} in your image with "
            f"{round(result.confidence)}% confidence. {result.description}",
            Role.BOT,
        ))
        turn.messages.append(self._post(f"Typical damage: {result.damage}", Role.BOT))
        treatments = "\n".join(result.treatments)
        turn.messages.append(self._post(f"Recommended treatments:\n{treatments}", Role.BOT))
        self.panels.close(Panel.PEST_DETECTION)
        return turn
    
    def show_suggestions(self) -> bool:
        return self.panels.should_show_suggestions(len(self.store))
    
    def reset(self) -> None:
        """Start over with an empty transcript and fresh UI state."""
        self.store.clear()
        self.context.clear()
        self.panels = PanelController()
        self.client.reset()
    
    def _post(
        self,
        content: str,
        role: Role,
        type: MessageType = MessageType.TEXT,
        image: Optional[str] = None,
    ) -> ChatMessage:
        """Append a message to the transcript and log it."""
        message = self.store.add(content, role, type, image=image)
        result = self.client.save_message(message)
        if not result.success:
            logger.debug(f"Message {message.id} kept in memory only")
        return message
