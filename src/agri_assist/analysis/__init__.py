"""
Image analysis: soil colour scanning and pest identification.
"""
from .soil_scanner import SoilScanner, SoilScanResult, SoilAnalysis
from .pest_detector import PestDetector, PestClassifier, PestDetectionResult, load_labels

__all__ = [
    "SoilScanner",
    "SoilScanResult",
    "SoilAnalysis",
    "PestDetector",
    "PestClassifier",
    "PestDetectionResult",
    "load_labels",
]
