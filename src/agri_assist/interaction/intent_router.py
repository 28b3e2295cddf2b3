"""
Deterministic intent router for message classification.

Routes farmer messages to intents by keyword substring matching.
Fast, safe, and predictable.
"""
from typing import Iterable
from .intent_types import IntentType


class IntentRouter:
    """
    Deterministic intent router.
    
    Rules are checked in order and the first match wins. Matching is on
    substrings, not words, so "latest" counts as "test".
    """
    
    # Intent keyword sets
    SOIL_KEYWORDS = ("soil", "test", "color")
    AID_KEYWORDS = (
        "government", "aid", "assistance", "program", "scheme", "subsidy", "loan",
    )
    HELP_KEYWORDS = ("help", "what can you do", "how to use")
    EXPERT_KEYWORDS = ("expert", "connect")
    PEST_KEYWORDS = ("pest", "insect", "bug", "disease")
    
    def route(self, text: str) -> IntentType:
        """
        Route a message to an intent type.
        
        :param text: Raw user text
        :return: IntentType enum value
        """
        q = (text or "").lower()
        
        if _contains_any(q, self.SOIL_KEYWORDS):
            return IntentType.SOIL_TEST
        
        if _contains_any(q, self.AID_KEYWORDS):
            return IntentType.GOVERNMENT_AID
        
        if _contains_any(q, self.HELP_KEYWORDS):
            return IntentType.HELP
        
        if _contains_any(q, self.EXPERT_KEYWORDS):
            return IntentType.EXPERT_CONNECT
        
        # Unreachable for text that mentions "soil test", which is caught above.
        if "enhanced" in q and "soil test" in q:
            return IntentType.ENHANCED_SOIL_TEST
        
        if _contains_any(q, self.PEST_KEYWORDS):
            return IntentType.PEST_DETECTION
        
        return IntentType.DEFAULT


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)
