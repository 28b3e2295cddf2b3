"""
Tests for the best-effort persistence client.
"""
import pytest
import requests
from unittest.mock import Mock

from agri_assist.memory import MessageStore, MessageType, Role
from agri_assist.persistence import ConversationClient


@pytest.fixture
def http():
    """requests.Session stand-in whose POSTs succeed with a conversation id."""
    session = Mock()
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"id": "conv-1"}
    session.post.return_value = response
    return session


@pytest.fixture
def message():
    return MessageStore().add("How do I test my soil?", Role.USER)


class TestSaveMessage:
    """Tests for ConversationClient.save_message."""

    def test_first_message_creates_conversation(self, http, message):
        client = ConversationClient("http://farm.test/", user_id="u1", session=http)
        
        result = client.save_message(message)
        
        assert result.success
        assert result.conversation_id == "conv-1"
        url = http.post.call_args.args[0]
        payload = http.post.call_args.kwargs["json"]
        assert url == "http://farm.test/api/conversation"
        assert payload == {
            "userId": "u1",
            "message": "How do I test my soil?",
            "role": "user",
            "type": "text",
            "image": None,
        }

    def test_later_messages_carry_conversation_id(self, http, message):
        client = ConversationClient("http://farm.test", session=http)
        client.save_message(message)
        
        bot = MessageStore().add("form", Role.BOT, MessageType.SOIL_FORM)
        client.save_message(bot)
        
        payload = http.post.call_args.kwargs["json"]
        assert payload["conversationId"] == "conv-1"
        assert payload["type"] == "soil-form"
        assert payload["role"] == "bot"

    def test_network_error_is_swallowed(self, http, message):
        http.post.side_effect = requests.ConnectionError("down")
        client = ConversationClient("http://farm.test", session=http)
        
        result = client.save_message(message)
        
        assert not result.success
        assert client.conversation_id is None

    def test_http_error_is_swallowed(self, http, message):
        http.post.return_value.raise_for_status.side_effect = requests.HTTPError("500")
        client = ConversationClient("http://farm.test", session=http)
        
        assert not client.save_message(message).success

    def test_non_json_body_counts_as_success(self, http, message):
        http.post.return_value.json.side_effect = ValueError("no json")
        client = ConversationClient("http://farm.test", session=http)
        
        result = client.save_message(message)
        
        assert result.success
        assert result.conversation_id is None

    def test_disabled_without_url(self, http, message):
        client = ConversationClient(None, session=http)
        
        assert not client.enabled
        assert not client.save_message(message).success
        http.post.assert_not_called()

    def test_reset_starts_new_conversation(self, http, message):
        client = ConversationClient("http://farm.test", session=http)
        client.save_message(message)
        client.reset()
        client.save_message(message)
        
        assert "conversationId" not in http.post.call_args.kwargs["json"]

    def test_timeout_passed(self, http, message):
        client = ConversationClient("http://farm.test", timeout=2.5, session=http)
        client.save_message(message)
        assert http.post.call_args.kwargs["timeout"] == 2.5

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout_rejected(self, http, timeout):
        with pytest.raises(ValueError, match="timeout"):
            ConversationClient("http://farm.test", timeout=timeout, session=http)

    def test_invalid_request_arguments_swallowed(self, http, message):
        http.post.side_effect = ValueError("Attempted to set connect timeout to 0")
        client = ConversationClient("http://farm.test", session=http)
        
        result = client.save_message(message)
        
        assert not result.success
        assert client.conversation_id is None


class TestScanRecords:
    """Tests for soil and pest result logging."""

    def test_record_soil_scan(self, http):
        client = ConversationClient("http://farm.test", session=http)
        
        assert client.record_soil_scan({"soilType": "Clay Soil"})
        assert http.post.call_args.args[0] == "http://farm.test/api/soil-test"

    def test_record_pest_detection_failure(self, http):
        http.post.side_effect = requests.Timeout("slow")
        client = ConversationClient("http://farm.test", session=http)
        
        assert not client.record_pest_detection({"pestName": "Aphids"})
        assert http.post.call_args.args[0] == "http://farm.test/api/pest-detection"
