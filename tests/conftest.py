"""
Shared fixtures.

The Flask module reads its configuration at import time, so the environment
is pinned here before any test imports it.
"""
import io
import os

import pytest
from PIL import Image

os.environ["CONVERSATION_API_URL"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret")

SANDY = (200, 150, 50)
CLAY = (120, 100, 90)
LOAM = (50, 40, 30)


def make_png(color=LOAM, size=(100, 100)) -> bytes:
    """Solid-colour PNG as bytes."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color=color).save(buffer, "PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def png_file(tmp_path):
    """Loam-coloured PNG written to a temp file."""
    path = tmp_path / "soil.png"
    path.write_bytes(make_png())
    return str(path)
