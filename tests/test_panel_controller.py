"""
Tests for the panel controller.
"""
import pytest

from agri_assist.interaction import Panel, PanelController, PanelDirective


class TestPanelController:
    """Tests for panel flags."""

    def test_initial_state(self):
        panels = PanelController()
        snapshot = panels.snapshot()
        
        assert snapshot == {
            "camera": False,
            "expert_connect": False,
            "enhanced_soil_test": False,
            "soil_scanner": False,
            "pest_detection": False,
            "suggestions": True,
            "welcome_screen": True,
        }

    def test_open_and_close(self):
        panels = PanelController()
        
        panels.open(Panel.CAMERA)
        assert panels.is_open(Panel.CAMERA)
        panels.close(Panel.CAMERA)
        assert not panels.is_open(Panel.CAMERA)

    def test_accepts_panel_names(self):
        panels = PanelController()
        panels.open("soil_scanner")
        assert panels.is_open(Panel.SOIL_SCANNER)

    def test_unknown_panel_rejected(self):
        with pytest.raises(ValueError):
            PanelController().open("tractor")

    def test_apply_directives(self):
        """Test directives open panels and show suggestions."""
        panels = PanelController()
        panels.hide_suggestions()
        
        panels.apply([PanelDirective.OPEN_PEST_DETECTION, PanelDirective.SHOW_SUGGESTIONS])
        
        assert panels.is_open(Panel.PEST_DETECTION)
        assert panels.suggestions is True
        assert not panels.is_open(Panel.EXPERT_CONNECT)

    def test_suggestions_only_for_short_conversations(self):
        panels = PanelController()
        
        assert panels.should_show_suggestions(0)
        assert panels.should_show_suggestions(2)
        assert not panels.should_show_suggestions(3)
        panels.hide_suggestions()
        assert not panels.should_show_suggestions(0)


class TestWelcomeScreen:
    """Tests for welcome screen option handling."""

    def test_start_chat_hides_welcome(self):
        panels = PanelController()
        panels.start_chat()
        assert panels.welcome_screen is False

    def test_connect_expert_opens_panel(self):
        panels = PanelController()
        
        assert panels.select_welcome_option("connect-expert") is None
        assert panels.is_open(Panel.EXPERT_CONNECT)
        assert panels.welcome_screen is False

    def test_enhanced_soil_test_opens_panel(self):
        panels = PanelController()
        
        assert panels.select_welcome_option("enhanced-soil-test") is None
        assert panels.is_open(Panel.ENHANCED_SOIL_TEST)

    def test_other_option_prefills_input(self):
        panels = PanelController()
        
        assert panels.select_welcome_option("soil-testing") == "I am interested in soil testing."
        assert panels.welcome_screen is False
        assert not any(
            panels.is_open(panel) for panel in Panel
        )

    def test_only_first_hyphen_replaced(self):
        panels = PanelController()
        assert panels.select_welcome_option("government-aid-info") == "I am interested in government aid-info."
