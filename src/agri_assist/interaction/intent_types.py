"""
Intent types for message classification.

Defines the closed set of intents a farmer's message can have.
"""
from enum import Enum


class IntentType(str, Enum):
    """Types of user intents."""
    SOIL_TEST = "soil_test"
    GOVERNMENT_AID = "government_aid"
    HELP = "help"
    EXPERT_CONNECT = "expert_connect"
    ENHANCED_SOIL_TEST = "enhanced_soil_test"
    PEST_DETECTION = "pest_detection"
    DEFAULT = "default_intent"
    # Only assigned when the soil scanner reports a result, never by text.
    SOIL_ANALYSIS = "soil_analysis"
