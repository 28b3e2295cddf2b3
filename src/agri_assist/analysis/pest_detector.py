"""
Pest detector.

Thin wrapper around a pretrained image classifier. The classifier itself is a
black box injected by the caller; this module only prepares the input,
picks the most likely label and attaches reference information.
"""
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Sequence

import numpy as np

from .imaging import ImageSource, load_image
from .pest_catalog import lookup_pest
from ..exceptions import ConfigurationError, ModelNotLoadedError

logger = logging.getLogger(__name__)

INPUT_SIZE = 224
UNKNOWN_PEST = "Unknown Pest"


class PestClassifier(Protocol):
    """Protocol for a pretrained pest image classifier."""
    def predict(self, batch: np.ndarray) -> Sequence[float]:
        """
        :param batch: Float array of shape (1, 224, 224, 3) scaled to [0, 1]
        :return: Class probabilities, shape (n,) or (1, n)
        """
        ...


@dataclass(frozen=True)
class PestDetectionResult:
    pest_name: str
    confidence: float  # percent, 0-100
    description: str
    damage: str
    treatments: List[str]
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pestName": self.pest_name,
            "confidence": self.confidence,
            "description": self.description,
            "damage": self.damage,
            "treatments": list(self.treatments),
            "timestamp": self.timestamp,
        }


def load_labels(path: str) -> List[str]:
    """
    Load class labels from a JSON list file.
    
    :raises ConfigurationError: If the file is not a JSON list of strings
    """
    try:
        with open(path, encoding="utf-8") as f:
            labels = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load class labels from {path}: {str(e)}")
    
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise ConfigurationError(f"Class labels in {path} must be a JSON list of strings")
    return labels


def preprocess(source: ImageSource) -> np.ndarray:
    """Resize to the model input size, scale to [0, 1] and add a batch axis."""
    img = load_image(source).resize((INPUT_SIZE, INPUT_SIZE))
    pixels = np.asarray(img, dtype=np.float32) / 255.0
    return np.expand_dims(pixels, axis=0)


class PestDetector:
    """Identifies the pest in a photo using an injected classifier."""
    
    def __init__(
        self,
        classifier: Optional[PestClassifier] = None,
        labels: Optional[List[str]] = None,
    ):
        self._classifier = classifier
        self._labels = list(labels or [])
    
    @property
    def is_loaded(self) -> bool:
        return self._classifier is not None
    
    def set_classifier(self, classifier: PestClassifier, labels: Optional[List[str]] = None) -> None:
        """Inject the pretrained model (and optionally its labels)."""
        self._classifier = classifier
        if labels is not None:
            self._labels = list(labels)
    
    def detect(self, source: ImageSource) -> PestDetectionResult:
        """
        Classify the pest in an image.
        
        :param source: Image to classify
        :return: PestDetectionResult with confidence as a percentage
        :raises ModelNotLoadedError: If no classifier has been injected
        """
        if self._classifier is None:
            raise ModelNotLoadedError("Model not loaded. Please try again later.")
        
        batch = preprocess(source)
        probabilities = np.asarray(self._classifier.predict(batch), dtype=np.float64).ravel()
        if probabilities.size == 0:
            raise ModelNotLoadedError("Classifier returned no predictions.")
        
        index = int(np.argmax(probabilities))
        pest_name = self._labels[index] if index < len(self._labels) else UNKNOWN_PEST
        confidence = float(probabilities[index]) * 100
        
        info = lookup_pest(pest_name)
        logger.info(f"Pest detection - {pest_name} ({confidence:.1f}%)")
        return PestDetectionResult(
            pest_name=pest_name,
            confidence=confidence,
            description=info.description,
            damage=info.damage,
            treatments=list(info.treatments),
        )
