"""
AgriAssist: a conversational assistant for farmers.
"""
from .app import AgriAssistApp
from .config import AgriAssistConfig
from .config_loader import load_config_from_env

__all__ = ["AgriAssistApp", "AgriAssistConfig", "load_config_from_env"]

__version__ = "0.1.0"
