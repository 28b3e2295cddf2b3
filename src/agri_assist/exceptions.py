class AgriAssistError(Exception):
    """Base exception for the farming assistant."""


class ConfigurationError(AgriAssistError):
    """Raised when configuration is missing or invalid."""


class ServiceNotInitializedError(AgriAssistError):
    """Raised when the service is used before initialization."""


class ModelNotLoadedError(AgriAssistError):
    """Raised when image classification is requested without a loaded model."""


class ExpertRequestError(AgriAssistError):
    """Raised when an expert consultation request cannot be submitted."""
