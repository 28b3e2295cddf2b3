"""
Tests for intent router.
"""
import pytest
from agri_assist.interaction import IntentRouter, IntentType


class TestIntentRouter:
    """Tests for IntentRouter."""

    def test_soil_test_intent(self):
        """Test soil testing detection."""
        router = IntentRouter()
        
        assert router.route("How do I test my soil?") == IntentType.SOIL_TEST
        assert router.route("soil") == IntentType.SOIL_TEST
        assert router.route("what color should good earth be") == IntentType.SOIL_TEST

    def test_government_aid_intent(self):
        """Test government aid detection."""
        router = IntentRouter()
        
        assert router.route("Tell me about government schemes") == IntentType.GOVERNMENT_AID
        assert router.route("I need a loan for a tractor") == IntentType.GOVERNMENT_AID
        assert router.route("is there any subsidy for seeds") == IntentType.GOVERNMENT_AID
        assert router.route("financial assistance") == IntentType.GOVERNMENT_AID

    def test_help_intent(self):
        """Test help detection."""
        router = IntentRouter()
        
        assert router.route("help") == IntentType.HELP
        assert router.route("What can you do?") == IntentType.HELP
        assert router.route("how to use this") == IntentType.HELP

    def test_expert_connect_intent(self):
        """Test expert connection detection."""
        router = IntentRouter()
        
        assert router.route("I want to talk to an expert") == IntentType.EXPERT_CONNECT
        assert router.route("connect me with someone") == IntentType.EXPERT_CONNECT

    def test_pest_detection_intent(self):
        """Test pest detection."""
        router = IntentRouter()
        
        assert router.route("there are insects on my leaves") == IntentType.PEST_DETECTION
        assert router.route("my plant has a disease") == IntentType.PEST_DETECTION
        assert router.route("bugs everywhere") == IntentType.PEST_DETECTION
        assert router.route("pest") == IntentType.PEST_DETECTION

    def test_default_intent(self):
        """Test fallback for unrelated or empty text."""
        router = IntentRouter()
        
        assert router.route("hello") == IntentType.DEFAULT
        assert router.route("what is the weather tomorrow") == IntentType.DEFAULT
        assert router.route("") == IntentType.DEFAULT
        assert router.route("   ") == IntentType.DEFAULT

    @pytest.mark.parametrize("text,expected", [
        ("soil test loan", IntentType.SOIL_TEST),
        ("help with a loan", IntentType.GOVERNMENT_AID),
        ("expert help", IntentType.HELP),
        ("help with pest", IntentType.HELP),
        ("connect me to a disease specialist", IntentType.EXPERT_CONNECT),
    ])
    def test_first_matching_rule_wins(self, text, expected):
        """Test rule order decides between overlapping keywords."""
        assert IntentRouter().route(text) == expected

    def test_enhanced_soil_test_is_caught_by_soil_rule(self):
        """Soil keywords are checked before the enhanced soil test rule."""
        assert IntentRouter().route("enhanced soil test") == IntentType.SOIL_TEST

    def test_substring_matching(self):
        """Keywords match inside other words."""
        router = IntentRouter()
        
        assert router.route("latest news") == IntentType.SOIL_TEST
        assert router.route("I paid the bill") == IntentType.GOVERNMENT_AID

    def test_case_insensitive(self):
        """Test that routing is case-insensitive."""
        router = IntentRouter()
        
        assert router.route("SOIL") == IntentType.SOIL_TEST
        assert router.route("Government Scheme") == IntentType.GOVERNMENT_AID
        assert router.route("PEST") == IntentType.PEST_DETECTION

    def test_soil_analysis_never_routed(self):
        """The scanner-only intent is not reachable from text."""
        router = IntentRouter()
        
        assert router.route("soil analysis") != IntentType.SOIL_ANALYSIS
        assert router.route("soil_analysis") != IntentType.SOIL_ANALYSIS
