"""
Expert connection.

Directory of agricultural experts and submission of consultation requests.
Unlike chat logging, a failed submission is reported to the caller so the
form can tell the farmer to try again.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ExpertRequestError

logger = logging.getLogger(__name__)

EXPERT_REQUEST_PATH = "/api/expert-request"


@dataclass(frozen=True)
class Expert:
    id: str
    name: str
    specialty: str
    organization: str
    available: bool


EXPERTS: List[Expert] = [
    Expert(
        id="exp1",
        name="Dr. Rajesh Kumar",
        specialty="Soil Scientist",
        organization="Tamil Nadu Agricultural University",
        available=True,
    ),
    Expert(
        id="exp2",
        name="Smt. Lakshmi Devi",
        specialty="Crop Disease Specialist",
        organization="State Agriculture Department",
        available=True,
    ),
    Expert(
        id="exp3",
        name="Shri. Venkatesh",
        specialty="Agricultural Economics",
        organization="Rural Development Agency",
        available=False,
    ),
]


def list_experts(available_only: bool = False) -> List[Dict[str, Any]]:
    """Expert directory as plain dicts."""
    return [asdict(e) for e in EXPERTS if e.available or not available_only]


class ExpertRequest(BaseModel):
    """Consultation request filled in on the expert connection form."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    expert_type: str = Field(default="", alias="expertType", max_length=100)
    crop_type: str = Field(default="", alias="cropType", max_length=100)
    land_size: str = Field(default="", alias="landSize", max_length=100)
    issue: str = Field(..., min_length=1, max_length=1000, description="Farming issue in the farmer's words")
    contact_number: str = Field(..., alias="contactNumber", min_length=5, max_length=20)
    preferred_time: str = Field(default="", alias="preferredTime", max_length=100)


class ExpertConnectionService:
    """Sends expert consultation requests to the backend."""
    
    def __init__(
        self,
        base_url: Optional[str],
        user_id: str = "current-user-id",
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self._user_id = user_id
        self._timeout = timeout
        self._http = session or requests.Session()
    
    def submit(self, request: ExpertRequest) -> Dict[str, Any]:
        """
        Submit a consultation request.
        
        :param request: Validated ExpertRequest
        :return: Decoded response body from the service
        :raises ExpertRequestError: If the service is not configured or rejects the request
        """
        if not self._base_url:
            raise ExpertRequestError("Expert request service is not configured.")
        
        payload = {"userId": self._user_id, **request.model_dump(by_alias=True)}
        try:
            response = self._http.post(
                f"{self._base_url}{EXPERT_REQUEST_PATH}",
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error saving expert request: {str(e)}")
            raise ExpertRequestError("Failed to save expert request") from e
        
        logger.info(f"Expert request submitted - type: {request.expert_type or 'any'}")
        try:
            return response.json()
        except ValueError:
            return {}
