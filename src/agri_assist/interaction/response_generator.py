"""
Response generator.

Maps an intent, the user's text and the conversation context to a bot
utterance. UI side effects are returned as directives instead of being
performed here, so generation stays a pure function.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from .intent_types import IntentType
from ..memory.message_store import MessageType

if TYPE_CHECKING:
    from ..context.session_context import ConversationContext


class PanelDirective(str, Enum):
    """UI changes a response asks the panel controller to make."""
    SHOW_SUGGESTIONS = "show_suggestions"
    OPEN_EXPERT_CONNECT = "open_expert_connect"
    OPEN_ENHANCED_SOIL_TEST = "open_enhanced_soil_test"
    OPEN_PEST_DETECTION = "open_pest_detection"


@dataclass(frozen=True)
class BotResponse:
    content: str
    type: MessageType = MessageType.TEXT
    directives: Tuple[PanelDirective, ...] = field(default_factory=tuple)


SOIL_TEST_REPLY = (
    "I can help you with soil testing. Please fill out this form or use the "
    "camera to analyze your soil:"
)
GOVERNMENT_AID_REPLY = (
    "I can provide information about government aid programs. "
    "Please tell me about your crops:"
)
HELP_REPLY = (
    "I'm your agricultural assistant! Here's how I can help:\n\n"
    "1️⃣ Soil Testing: I can analyze your soil type and suggest suitable crops and amendments\n\n"
    "2️⃣ Government Aid: I can help you find agricultural schemes, subsidies and loans you may be eligible for\n\n"
    "3️⃣ Pest Detection: I can identify common pests and suggest treatments\n\n"
    "Just ask me about any of these topics or use the suggested questions below!"
)
EXPERT_CONNECT_REPLY = "Connecting you to an expert. Please fill out the form."
ENHANCED_SOIL_TEST_REPLY = "Okay, let's get you set up with an enhanced soil test."
PEST_DETECTION_REPLY = (
    "Let's identify the pests affecting your crops. "
    "Please take a clear photo of the pest or affected plant part."
)
DEFAULT_REPLY = (
    "I'm here to help with soil testing, government aid information, and pest "
    "detection. Could you please specify which service you're interested in?"
)


def generate_response(
    intent: IntentType,
    text: str,
    context: Optional["ConversationContext"] = None,
) -> BotResponse:
    """
    Build the bot reply for a classified message.
    
    :param intent: Intent returned by the router
    :param text: Raw user text
    :param context: Conversation context from earlier turns (read only)
    :return: BotResponse with content, message type and panel directives
    """
    if intent == IntentType.SOIL_TEST:
        content = SOIL_TEST_REPLY
        if context is not None and context.soil_type:
            content = (
                f"{content}\n\nYour last scan detected {context.soil_type}. "
                "A lab test will confirm its nutrient levels."
            )
        return BotResponse(content, MessageType.SOIL_FORM)
    
    if intent == IntentType.GOVERNMENT_AID:
        return BotResponse(GOVERNMENT_AID_REPLY, MessageType.AID_FORM)
    
    if intent == IntentType.HELP:
        return BotResponse(HELP_REPLY, directives=(PanelDirective.SHOW_SUGGESTIONS,))
    
    if intent == IntentType.EXPERT_CONNECT:
        return BotResponse(
            EXPERT_CONNECT_REPLY, directives=(PanelDirective.OPEN_EXPERT_CONNECT,)
        )
    
    if intent == IntentType.ENHANCED_SOIL_TEST:
        return BotResponse(
            ENHANCED_SOIL_TEST_REPLY,
            directives=(PanelDirective.OPEN_ENHANCED_SOIL_TEST,),
        )
    
    if intent == IntentType.PEST_DETECTION:
        return BotResponse(
            PEST_DETECTION_REPLY, directives=(PanelDirective.OPEN_PEST_DETECTION,)
        )
    
    return BotResponse(DEFAULT_REPLY, directives=(PanelDirective.SHOW_SUGGESTIONS,))
