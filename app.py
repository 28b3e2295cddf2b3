#!/usr/bin/env python3
"""
Flask REST API for the farming assistant.

Serves the chat state (messages, panel flags, suggestions) that the browser
front-end renders. Configuration comes from environment variables.
"""
import os
import logging
import tempfile
import uuid
from pathlib import Path

from flask import Flask, request, jsonify, session
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from PIL import Image
from pydantic import ValidationError as PydanticValidationError

from agri_assist.app import AgriAssistApp
from agri_assist.analysis.imaging import to_data_url
from agri_assist.config_loader import load_config_from_env
from agri_assist.exceptions import ExpertRequestError, ModelNotLoadedError
from agri_assist.experts import ExpertRequest
from agri_assist.security import FileValidationError, FileValidator, InputValidator, ValidationError

config = load_config_from_env()

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("FLASK_SECRET_KEY", os.urandom(32).hex())
app.config["RATELIMIT_ENABLED"] = config.rate_limit_enabled
CORS(app, supports_credentials=True)

limiter = Limiter(
    key_func=get_remote_address,
    app=app,
    default_limits=["200 per hour", "30 per minute"],
    storage_uri="memory://",
)

agri_app = AgriAssistApp(config)
agri_app.initialize()

IMAGE_MIME_TYPES = {"JPEG": "image/jpeg", "PNG": "image/png"}


def _session_id() -> str:
    """Get or create the session ID stored in the signed cookie."""
    if "session_id" not in session:
        session["session_id"] = str(uuid.uuid4())
    return session["session_id"]


def _save_upload():
    """
    Save the uploaded 'image' file to a validated temp file.

    :return: Temp file path
    :raises FileValidationError: If the upload is missing or not a valid image
    """
    if "image" not in request.files:
        raise FileValidationError("Missing 'image' file in form data")

    file = request.files["image"]
    if not file.filename:
        raise FileValidationError("Empty file")

    suffix = Path(file.filename).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        file.save(tmp.name)
        tmp_path = tmp.name

    is_valid, error_msg = FileValidator.validate_image_file(tmp_path)
    if not is_valid:
        os.unlink(tmp_path)
        raise FileValidationError(f"File validation failed: {error_msg}")

    return tmp_path


@app.errorhandler(ValidationError)
@app.errorhandler(FileValidationError)
def handle_validation_error(e):
    logger.warning(f"Validation failed: {str(e)}")
    return jsonify({"error": str(e)}), 400


@app.errorhandler(ModelNotLoadedError)
def handle_model_not_loaded(e):
    logger.warning(f"Pest model unavailable: {str(e)}")
    return jsonify({"error": str(e)}), 503


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/chat", methods=["POST"])
@limiter.limit("20 per minute")
def chat():
    """Chat endpoint."""
    data = request.get_json(silent=True)
    if not data or "message" not in data:
        return jsonify({"error": "Missing 'message' in request body"}), 400

    message = InputValidator.sanitize_message(data["message"])
    session_id = _session_id()

    try:
        response = agri_app.chat(message, session_id=session_id)
    except Exception as e:
        logger.error(f"Chat endpoint error: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

    logger.info(f"Chat - Session: {session_id}, Intent: {response.intent}, Latency: {response.latency_ms}ms")
    return jsonify(response.to_dict())


@app.route("/welcome", methods=["POST"])
def welcome():
    """Welcome screen option selected."""
    data = request.get_json(silent=True) or {}
    option = data.get("option")
    if not option or not isinstance(option, str):
        return jsonify({"error": "Missing 'option' in request body"}), 400

    option = InputValidator.validate_length(option, 100, "Option")
    response = agri_app.select_welcome_option(option, session_id=_session_id())
    return jsonify(response.to_dict())


@app.route("/start", methods=["POST"])
def start():
    """Dismiss the welcome screen."""
    response = agri_app.start_chat(session_id=_session_id())
    return jsonify(response.to_dict())


@app.route("/panels/<panel>/<action>", methods=["POST"])
def panels(panel, action):
    """Open or close a panel."""
    if action not in ("open", "close"):
        return jsonify({"error": f"Unknown action '{action}'"}), 404

    try:
        flags = agri_app.set_panel(panel, action == "open", session_id=_session_id())
    except ValueError:
        return jsonify({"error": f"Unknown panel '{panel}'"}), 404

    return jsonify({"panels": flags})


@app.route("/state")
def state():
    """Full conversation snapshot."""
    return jsonify(agri_app.get_state(session_id=_session_id()).to_dict())


@app.route("/image", methods=["POST"])
@limiter.limit("10 per minute")
def image():
    """Add a captured photo to the chat."""
    tmp_path = _save_upload()
    try:
        with Image.open(tmp_path) as img:
            mime_type = IMAGE_MIME_TYPES[img.format]
        data_url = to_data_url(Path(tmp_path).read_bytes(), mime_type)
        response = agri_app.capture_image(data_url, session_id=_session_id())
        return jsonify(response.to_dict())
    finally:
        os.unlink(tmp_path)


@app.route("/soil-scan", methods=["POST"])
@limiter.limit("10 per minute")
def soil_scan():
    """Classify soil colour from a photo."""
    tmp_path = _save_upload()
    session_id = _session_id()
    try:
        response = agri_app.scan_soil(tmp_path, session_id=session_id)
        logger.info(f"Soil scan - Session: {session_id}, Type: {response.analysis['soilType']}")
        return jsonify(response.to_dict())
    finally:
        os.unlink(tmp_path)


@app.route("/pest-detect", methods=["POST"])
@limiter.limit("10 per minute")
def pest_detect():
    """Identify a pest from a photo."""
    tmp_path = _save_upload()
    session_id = _session_id()
    try:
        response = agri_app.detect_pest(tmp_path, session_id=session_id)
        logger.info(f"Pest detection - Session: {session_id}, Pest: {response.analysis['pestName']}")
        return jsonify(response.to_dict())
    finally:
        os.unlink(tmp_path)


@app.route("/experts")
def experts():
    """Expert directory."""
    available_only = request.args.get("available", "false").lower() == "true"
    return jsonify({"experts": agri_app.experts(available_only=available_only)})


@app.route("/expert-request", methods=["POST"])
@limiter.limit("5 per minute")
def expert_request():
    """Submit an expert consultation request."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Missing request body"}), 400

    try:
        expert_req = ExpertRequest.model_validate(data)
    except PydanticValidationError as e:
        return jsonify({"error": "Invalid expert request", "details": e.errors(include_url=False)}), 400

    try:
        result = agri_app.submit_expert_request(expert_req, session_id=_session_id())
    except ExpertRequestError as e:
        return jsonify({"error": str(e)}), 502

    return jsonify({"status": "success", "result": result})


@app.route("/reset", methods=["POST"])
def reset():
    """Start a new conversation."""
    agri_app.reset(session_id=_session_id())
    return jsonify({"status": "success", "message": "Conversation cleared"})


if __name__ == "__main__":
    port = int(os.getenv("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
