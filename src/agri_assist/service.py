"""
Farming assistant service.

Facade over the conversation subsystem; the only entry point for the UI
layers. Holds one ChatOrchestrator per session.
"""
import logging
from time import time
from typing import Any, Dict, Optional

from .analysis.imaging import ImageSource
from .analysis.pest_detector import PestClassifier, PestDetector
from .analysis.soil_scanner import SoilScanner
from .config import AgriAssistConfig
from .context.context_manager import SessionContextManager
from .experts import ExpertConnectionService, ExpertRequest
from .interaction.intent_router import IntentRouter
from .interaction.panel_controller import Panel
from .interaction.suggestions import SUGGESTED_QUESTIONS
from .orchestration.chat_orchestrator import ChatOrchestrator, ChatTurn
from .persistence.conversation_client import ConversationClient
from .schemas import ChatResponse, ConversationState

logger = logging.getLogger(__name__)


class AgriAssistService:
    """
    Facade over the conversation subsystem.
    
    Collaborators (scanners, expert service) are created here and can be
    replaced through the setters for testing.
    """

    def __init__(self, config: AgriAssistConfig):
        self.config = config
        self._router = IntentRouter()
        self._contexts = SessionContextManager(max_queries=config.max_previous_queries)
        self._orchestrators: Dict[str, ChatOrchestrator] = {}
        self._soil_scanner = SoilScanner()
        self._pest_detector = PestDetector()
        self._experts = ExpertConnectionService(
            config.conversation_api_url,
            user_id=config.user_id,
            timeout=config.persistence_timeout,
        )

    # ----------------------------
    # Chat
    # ----------------------------
    def chat(self, message: str, session_id: str = "default") -> ChatResponse:
        """
        Process a typed message.
        
        :param message: User text
        :param session_id: Conversation identifier
        :return: ChatResponse with the new messages and UI state
        """
        start_time = time()
        orchestrator = self.get_orchestrator(session_id)
        turn = orchestrator.handle_user_message(message)
        return self._respond(orchestrator, turn, start_time)

    def capture_image(self, image: str, session_id: str = "default") -> ChatResponse:
        """Add a photo (data URL) to the chat."""
        start_time = time()
        orchestrator = self.get_orchestrator(session_id)
        turn = orchestrator.handle_image_capture(image)
        return self._respond(orchestrator, turn, start_time)

    # ----------------------------
    # Image analysis
    # ----------------------------
    def scan_soil(self, image: ImageSource, session_id: str = "default") -> ChatResponse:
        """
        Classify soil from a photo and report it in the chat.
        
        :raises FileValidationError: If the image cannot be decoded
        """
        start_time = time()
        orchestrator = self.get_orchestrator(session_id)
        result = self._soil_scanner.scan(image)
        orchestrator.client.record_soil_scan(result.to_dict())
        analysis = SoilScanner.analyze(result)
        turn = orchestrator.handle_soil_detected(analysis)
        response = self._respond(orchestrator, turn, start_time)
        response.analysis = {**analysis.to_dict(), "soilColor": result.soil_color}
        return response

    def detect_pest(self, image: ImageSource, session_id: str = "default") -> ChatResponse:
        """
        Identify the pest in a photo and report it in the chat.
        
        :raises ModelNotLoadedError: If no pest classifier has been injected
        """
        start_time = time()
        orchestrator = self.get_orchestrator(session_id)
        result = self._pest_detector.detect(image)
        orchestrator.client.record_pest_detection(result.to_dict())
        turn = orchestrator.handle_pest_detected(result)
        response = self._respond(orchestrator, turn, start_time)
        response.analysis = result.to_dict()
        return response

    # ----------------------------
    # UI state
    # ----------------------------
    def select_welcome_option(self, option: str, session_id: str = "default") -> ChatResponse:
        """Handle a welcome screen choice; may return text to prefill."""
        orchestrator = self.get_orchestrator(session_id)
        prefill = orchestrator.panels.select_welcome_option(option)
        response = self._respond(orchestrator, ChatTurn(), time())
        response.prefill = prefill
        return response

    def start_chat(self, session_id: str = "default") -> ChatResponse:
        orchestrator = self.get_orchestrator(session_id)
        orchestrator.panels.start_chat()
        return self._respond(orchestrator, ChatTurn(), time())

    def set_panel(self, panel: str, is_open: bool, session_id: str = "default") -> Dict[str, bool]:
        """
        Open or close a panel.
        
        :raises ValueError: If the panel name is unknown
        """
        panels = self.get_orchestrator(session_id).panels
        if is_open:
            panels.open(Panel(panel))
        else:
            panels.close(Panel(panel))
        return panels.snapshot()

    def get_state(self, session_id: str = "default") -> ConversationState:
        orchestrator = self.get_orchestrator(session_id)
        return ConversationState(
            messages=orchestrator.store.messages(),
            context=orchestrator.context.to_dict(),
            panels=orchestrator.panels.snapshot(),
            show_suggestions=orchestrator.show_suggestions(),
            conversation_id=orchestrator.client.conversation_id,
        )

    def reset(self, session_id: str = "default") -> None:
        """Clear transcript, context and panels for a session."""
        if session_id in self._orchestrators:
            self._orchestrators[session_id].reset()
        logger.info(f"Conversation reset - Session: {session_id}")

    # ----------------------------
    # Experts
    # ----------------------------
    def submit_expert_request(self, request: ExpertRequest, session_id: str = "default") -> Dict[str, Any]:
        """
        Submit an expert consultation request and close the expert panel.
        
        :raises ExpertRequestError: If the request could not be saved
        """
        result = self._experts.submit(request)
        self.get_orchestrator(session_id).panels.close(Panel.EXPERT_CONNECT)
        return result

    # ----------------------------
    # Dependency injection setters
    # ----------------------------
    def set_pest_classifier(self, classifier: PestClassifier, labels=None) -> None:
        """Inject the pretrained pest classifier."""
        self._pest_detector.set_classifier(classifier, labels)

    def get_orchestrator(self, session_id: str) -> ChatOrchestrator:
        """Get or create the orchestrator for a session."""
        if session_id not in self._orchestrators:
            self._orchestrators[session_id] = ChatOrchestrator(
                context=self._contexts.get_context(session_id),
                client=self._new_client(),
                router=self._router,
            )
        return self._orchestrators[session_id]

    def _new_client(self) -> ConversationClient:
        return ConversationClient(
            self.config.conversation_api_url,
            user_id=self.config.user_id,
            timeout=self.config.persistence_timeout,
        )

    def _respond(self, orchestrator: ChatOrchestrator, turn: ChatTurn, start_time: float) -> ChatResponse:
        return ChatResponse(
            messages=turn.messages,
            panels=orchestrator.panels.snapshot(),
            show_suggestions=orchestrator.show_suggestions(),
            suggested_questions=list(SUGGESTED_QUESTIONS),
            intent=turn.intent.value if turn.intent else None,
            latency_ms=int((time() - start_time) * 1000),
        )
