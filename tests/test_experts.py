"""
Tests for the expert directory and consultation requests.
"""
import pytest
import requests
from unittest.mock import Mock
from pydantic import ValidationError

from agri_assist.exceptions import ExpertRequestError
from agri_assist.experts import ExpertConnectionService, ExpertRequest, list_experts


@pytest.fixture
def expert_request():
    return ExpertRequest.model_validate({
        "expertType": "soil",
        "cropType": "paddy",
        "landSize": "2 acres",
        "issue": "Leaves turning yellow",
        "contactNumber": "9876543210",
        "preferredTime": "morning",
    })


class TestDirectory:

    def test_list_experts(self):
        experts = list_experts()
        assert len(experts) == 3
        assert experts[0]["name"] == "Dr. Rajesh Kumar"

    def test_available_only(self):
        experts = list_experts(available_only=True)
        assert all(e["available"] for e in experts)
        assert "Shri. Venkatesh" not in [e["name"] for e in experts]


class TestExpertRequest:

    def test_aliases_and_field_names(self, expert_request):
        assert expert_request.crop_type == "paddy"
        same = ExpertRequest(issue="Leaves turning yellow", contact_number="9876543210")
        assert same.expert_type == ""

    def test_issue_required(self):
        with pytest.raises(ValidationError):
            ExpertRequest.model_validate({"contactNumber": "9876543210"})

    def test_contact_number_too_short(self):
        with pytest.raises(ValidationError):
            ExpertRequest.model_validate({"issue": "help", "contactNumber": "12"})


class TestExpertConnectionService:

    def test_submit(self, expert_request):
        http = Mock()
        http.post.return_value.json.return_value = {"id": "req-1"}
        service = ExpertConnectionService("http://farm.test", user_id="u1", session=http)
        
        assert service.submit(expert_request) == {"id": "req-1"}
        assert http.post.call_args.args[0] == "http://farm.test/api/expert-request"
        payload = http.post.call_args.kwargs["json"]
        assert payload["userId"] == "u1"
        assert payload["contactNumber"] == "9876543210"
        assert payload["landSize"] == "2 acres"

    def test_submit_failure_raises(self, expert_request):
        http = Mock()
        http.post.return_value.raise_for_status.side_effect = requests.HTTPError("500")
        service = ExpertConnectionService("http://farm.test", session=http)
        
        with pytest.raises(ExpertRequestError):
            service.submit(expert_request)

    def test_not_configured(self, expert_request):
        with pytest.raises(ExpertRequestError, match="not configured"):
            ExpertConnectionService(None).submit(expert_request)
