"""
Tests for the colour-based soil scanner.
"""
import pytest
from PIL import Image

from agri_assist.analysis import SoilScanner
from agri_assist.analysis.imaging import to_data_url
from agri_assist.analysis.soil_scanner import classify_rgb
from agri_assist.security import FileValidationError

from conftest import CLAY, LOAM, SANDY, make_png


class TestClassifyRgb:
    """Tests for the colour thresholds."""

    @pytest.mark.parametrize("rgb,expected", [
        (SANDY, ("Sandy Soil", "6.0 - 7.0")),
        (CLAY, ("Clay Soil", "5.0 - 6.0")),
        (LOAM, ("Loam Soil", "6.5 - 7.5")),
        ((255, 255, 255), ("Unknown", "Unknown")),
    ])
    def test_thresholds(self, rgb, expected):
        assert classify_rgb(*rgb) == expected

    def test_boundaries_are_exclusive(self):
        assert classify_rgb(150, 121, 50)[0] != "Sandy Soil"
        assert classify_rgb(100, 100, 150)[0] == "Unknown"


class TestSoilScanner:
    """Tests for SoilScanner."""

    def test_scan_pil_image(self):
        result = SoilScanner().scan(Image.new("RGB", (120, 80), color=SANDY))
        
        assert result.soil_type == "Sandy Soil"
        assert result.ph_estimate == "6.0 - 7.0"
        assert result.soil_color == "RGB(200, 150, 50)"
        assert result.rgb == SANDY

    def test_scan_bytes_path_and_data_url(self, png_file):
        scanner = SoilScanner()
        png = make_png(CLAY)
        
        assert scanner.scan(png).soil_type == "Clay Soil"
        assert scanner.scan(png_file).soil_type == "Loam Soil"
        assert scanner.scan(to_data_url(png, "image/png")).soil_type == "Clay Soil"

    def test_only_centre_is_sampled(self):
        """Test the border colour does not affect the result."""
        img = Image.new("RGB", (200, 200), color=(255, 255, 255))
        img.paste(Image.new("RGB", (60, 60), color=LOAM), (70, 70))
        
        assert SoilScanner().scan(img).soil_type == "Loam Soil"

    def test_small_image_uses_whole_frame(self):
        img = Image.new("RGB", (10, 10), color=CLAY)
        assert SoilScanner().average_color(img) == CLAY

    def test_average_rounds_half_up(self):
        img = Image.new("RGB", (2, 1))
        img.putpixel((0, 0), (100, 100, 100))
        img.putpixel((1, 0), (101, 101, 101))
        
        assert SoilScanner().average_color(img) == (101, 101, 101)

    def test_unreadable_image(self):
        with pytest.raises(FileValidationError):
            SoilScanner().scan(b"not an image")

    def test_analyze_known_soil(self):
        scanner = SoilScanner()
        analysis = scanner.analyze(scanner.scan(Image.new("RGB", (60, 60), color=LOAM)))
        
        assert analysis.soil_type == "Loam Soil"
        assert analysis.label == "Loam"
        assert analysis.fertility == "high"
        assert analysis.recommendations

    def test_analyze_unknown_soil(self):
        scanner = SoilScanner()
        analysis = scanner.analyze(scanner.scan(Image.new("RGB", (60, 60), color=(255, 255, 255))))
        
        assert analysis.label == "Unknown"
        assert analysis.fertility == "unknown"
        assert any("laboratory" in r for r in analysis.recommendations)

    def test_result_dict_uses_wire_names(self):
        data = SoilScanner().scan(Image.new("RGB", (60, 60), color=SANDY)).to_dict()
        assert set(data) == {"soilColor", "soilType", "phEstimate", "timestamp"}
