"""
Configuration validation utilities.

Reads environment variables and validates them with helpful error messages.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.
    
    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)
    
    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )
    
    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {value}"
        )
    
    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def get_bool_env(key: str, default: bool) -> bool:
    """Read a true/false environment variable."""
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_number_env(key: str, default, cast=float, positive: bool = False):
    """
    Read a numeric environment variable.

    :param positive: Reject zero and negative values
    :raises: ConfigurationError if the value does not parse or is out of range
    """
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default
    try:
        number = cast(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    if positive and number <= 0:
        raise ConfigurationError(f"{key} must be greater than 0, got {value!r}")
    return number


def validate_url(url: str, url_name: str) -> str:
    """
    Validate an HTTP(S) base URL and strip any trailing slash.

    :raises: ConfigurationError if the scheme is not http or https
    """
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"{url_name} must start with http:// or https://, got {url!r}"
        )
    return url.rstrip("/")


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.
    
    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")
    
    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file/directory exists."
        )
    
    return path


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "replace",
        "TODO",
    ]
    
    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)
