from dataclasses import dataclass
from typing import Optional


@dataclass
class AgriAssistConfig:
    # Persistence
    conversation_api_url: Optional[str] = None
    persistence_timeout: float = 5.0
    user_id: str = "current-user-id"

    # Pest classifier
    pest_labels_path: Optional[str] = None

    # Conversation
    max_previous_queries: int = 10

    # HTTP API
    rate_limit_enabled: bool = True
    log_level: str = "INFO"
