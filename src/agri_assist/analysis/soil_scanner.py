"""
Soil scanner.

Classifies soil from a photo by the average colour of a small patch at the
centre of the frame, then looks up a profile with fertility and
recommendations for the detected type.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple

import numpy as np

from .imaging import ImageSource, load_image

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 50
UNKNOWN = "Unknown"


@dataclass(frozen=True)
class SoilScanResult:
    soil_color: str
    soil_type: str
    ph_estimate: str
    rgb: Tuple[int, int, int]
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "soilColor": self.soil_color,
            "soilType": self.soil_type,
            "phEstimate": self.ph_estimate,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class SoilProfile:
    color: str
    fertility: str
    organic_matter: str
    recommendations: List[str]


@dataclass(frozen=True)
class SoilAnalysis:
    """What the chat tells the farmer after a scan."""
    soil_type: str
    color: str
    fertility: str
    organic_matter: str
    ph_estimate: str
    recommendations: List[str]

    @property
    def label(self) -> str:
        """Soil type without the trailing "Soil", e.g. "Sandy"."""
        if self.soil_type.endswith(" Soil"):
            return self.soil_type[: -len(" Soil")]
        return self.soil_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "soilType": self.soil_type,
            "color": self.color,
            "fertility": self.fertility,
            "organicMatter": self.organic_matter,
            "phEstimate": self.ph_estimate,
            "recommendations": list(self.recommendations),
        }


SOIL_PROFILES: Dict[str, SoilProfile] = {
    "Sandy Soil": SoilProfile(
        color="light brown",
        fertility="low",
        organic_matter="low",
        recommendations=[
            "Add compost or farmyard manure to improve water retention",
            "Irrigate little and often; sandy soil drains quickly",
            "Suitable crops: groundnut, watermelon, carrot, millet",
        ],
    ),
    "Clay Soil": SoilProfile(
        color="reddish brown",
        fertility="moderate",
        organic_matter="moderate",
        recommendations=[
            "Apply lime if a lab test confirms acidity",
            "Add organic matter and avoid tilling when wet to prevent compaction",
            "Suitable crops: paddy, wheat, cotton, sugarcane",
        ],
    ),
    "Loam Soil": SoilProfile(
        color="dark brown",
        fertility="high",
        organic_matter="high",
        recommendations=[
            "Maintain fertility with crop rotation and green manure",
            "Mulch to conserve moisture in dry months",
            "Suitable crops: most vegetables, maize, pulses, oilseeds",
        ],
    ),
}

UNKNOWN_PROFILE = SoilProfile(
    color="mixed",
    fertility="unknown",
    organic_matter="unknown",
    recommendations=[
        "Retake the photo in daylight with the soil filling the centre of the frame",
        "Send a sample to your nearest soil testing laboratory for an accurate report",
    ],
)


def classify_rgb(r: int, g: int, b: int) -> Tuple[str, str]:
    """
    Map an average colour to (soil type, pH estimate).
    
    :return: Tuple of soil type name and pH range string
    """
    if r > 150 and g > 120 and b < 100:
        return "Sandy Soil", "6.0 - 7.0"
    if 100 < r < 150 and 80 < g < 120:
        return "Clay Soil", "5.0 - 6.0"
    if r < 100 and g < 100 and b < 100:
        return "Loam Soil", "6.5 - 7.5"
    return UNKNOWN, UNKNOWN


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


class SoilScanner:
    """Colour-based soil classifier over the centre patch of an image."""
    
    def __init__(self, sample_size: int = SAMPLE_SIZE):
        self.sample_size = sample_size
    
    def average_color(self, source: ImageSource) -> Tuple[int, int, int]:
        """
        Average RGB of the centre sample, clipped to the image bounds.
        
        :param source: Image to sample
        :return: Rounded (r, g, b)
        """
        img = load_image(source)
        pixels = np.asarray(img, dtype=np.float64)
        height, width = pixels.shape[:2]
        
        half = self.sample_size // 2
        cx, cy = width // 2, height // 2
        top, left = max(cy - half, 0), max(cx - half, 0)
        bottom = min(top + self.sample_size, height)
        right = min(left + self.sample_size, width)
        
        patch = pixels[top:bottom, left:right, :3]
        mean = patch.reshape(-1, 3).mean(axis=0)
        return tuple(_round_half_up(channel) for channel in mean)
    
    def scan(self, source: ImageSource) -> SoilScanResult:
        """
        Classify the soil in an image.
        
        :param source: Image to classify
        :return: SoilScanResult
        """
        r, g, b = self.average_color(source)
        soil_type, ph_estimate = classify_rgb(r, g, b)
        logger.info(f"Soil scan - RGB({r}, {g}, {b}) -> {soil_type}")
        return SoilScanResult(
            soil_color=f"RGB({r}, {g}, {b})",
            soil_type=soil_type,
            ph_estimate=ph_estimate,
            rgb=(r, g, b),
        )
    
    @staticmethod
    def analyze(result: SoilScanResult) -> SoilAnalysis:
        """Attach profile details to a scan result."""
        profile = SOIL_PROFILES.get(result.soil_type, UNKNOWN_PROFILE)
        return SoilAnalysis(
            soil_type=result.soil_type,
            color=profile.color,
            fertility=profile.fertility,
            organic_matter=profile.organic_matter,
            ph_estimate=result.ph_estimate,
            recommendations=list(profile.recommendations),
        )
