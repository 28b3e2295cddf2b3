"""
Public application facade for the farming assistant.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from typing import Any, Dict, Optional

from .analysis.imaging import ImageSource
from .analysis.pest_detector import PestClassifier, load_labels
from .config import AgriAssistConfig
from .exceptions import ServiceNotInitializedError
from .experts import ExpertRequest, list_experts
from .schemas import ChatResponse, ConversationState
from .service import AgriAssistService

logger = logging.getLogger(__name__)


class AgriAssistApp:
    """
    Public application facade.
    
    All dependency wiring is encapsulated here.
    
    Usage:
        config = load_config_from_env()
        app = AgriAssistApp(config)
        app.initialize()
        response = app.chat("How do I test my soil?", session_id="abc")
    """
    
    def __init__(self, config: AgriAssistConfig):
        """
        :param config: AgriAssistConfig instance
        """
        self._config = config
        self._service: Optional[AgriAssistService] = None
        self._pest_labels = []
    
    def initialize(self) -> None:
        """
        Create the service and load the pest class labels if configured.
        
        Call this once before any other method.
        """
        if self._service:
            return
        
        self._service = AgriAssistService(self._config)
        
        if self._config.pest_labels_path:
            self._pest_labels = load_labels(self._config.pest_labels_path)
            logger.info(f"Loaded {len(self._pest_labels)} pest class labels")
        
        if not self._config.conversation_api_url:
            logger.warning("CONVERSATION_API_URL not set; conversations will not be persisted")
    
    @property
    def service(self) -> AgriAssistService:
        if not self._service:
            raise ServiceNotInitializedError("App not initialized. Call initialize() first.")
        return self._service
    
    def chat(self, message: str, session_id: str = "default") -> ChatResponse:
        return self.service.chat(message, session_id=session_id)
    
    def capture_image(self, image: str, session_id: str = "default") -> ChatResponse:
        return self.service.capture_image(image, session_id=session_id)
    
    def scan_soil(self, image: ImageSource, session_id: str = "default") -> ChatResponse:
        return self.service.scan_soil(image, session_id=session_id)
    
    def detect_pest(self, image: ImageSource, session_id: str = "default") -> ChatResponse:
        return self.service.detect_pest(image, session_id=session_id)
    
    def select_welcome_option(self, option: str, session_id: str = "default") -> ChatResponse:
        return self.service.select_welcome_option(option, session_id=session_id)
    
    def start_chat(self, session_id: str = "default") -> ChatResponse:
        return self.service.start_chat(session_id=session_id)
    
    def set_panel(self, panel: str, is_open: bool, session_id: str = "default") -> Dict[str, bool]:
        return self.service.set_panel(panel, is_open, session_id=session_id)
    
    def get_state(self, session_id: str = "default") -> ConversationState:
        return self.service.get_state(session_id=session_id)
    
    def reset(self, session_id: str = "default") -> None:
        self.service.reset(session_id=session_id)
    
    def experts(self, available_only: bool = False):
        return list_experts(available_only=available_only)
    
    def submit_expert_request(self, request: ExpertRequest, session_id: str = "default") -> Dict[str, Any]:
        return self.service.submit_expert_request(request, session_id=session_id)
    
    def set_pest_classifier(self, classifier: PestClassifier) -> None:
        """
        Inject the pretrained pest classifier, using the configured labels.
        
        :param classifier: Object with a predict(batch) method
        """
        self.service.set_pest_classifier(classifier, self._pest_labels or None)
