"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import AgriAssistConfig
from .config_validator import (
    get_bool_env,
    get_number_env,
    get_optional_env,
    validate_path,
    validate_url,
)


def load_config_from_env() -> AgriAssistConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = AgriAssistApp(config)
        app.initialize()
    
    :return: Validated AgriAssistConfig instance
    :raises: ConfigurationError if values are invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    conversation_api_url = get_optional_env("CONVERSATION_API_URL")
    if conversation_api_url:
        conversation_api_url = validate_url(conversation_api_url, "CONVERSATION_API_URL")
    
    config = AgriAssistConfig(
        conversation_api_url=conversation_api_url or None,
        persistence_timeout=get_number_env("PERSISTENCE_TIMEOUT", 5.0, positive=True),
        user_id=get_optional_env("USER_ID") or "current-user-id",
        pest_labels_path=get_optional_env("PEST_LABELS_PATH") or None,
        max_previous_queries=get_number_env("MAX_PREVIOUS_QUERIES", 10, cast=int, positive=True),
        rate_limit_enabled=get_bool_env("RATE_LIMIT_ENABLED", True),
        log_level=(get_optional_env("LOG_LEVEL") or "INFO").upper(),
    )
    
    if config.pest_labels_path:
        validate_path(config.pest_labels_path, "PEST_LABELS_PATH", must_exist=True)
    
    return config
