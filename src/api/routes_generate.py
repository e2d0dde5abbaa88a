from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from qf_utils.file_utils import UploadedFile, secure_name
from qf_utils.logger_utils import logger
from qf_utils.validation import parse_question_count, validate_upload_batch
from src.domain.errors import BaseAppException
from src.domain.models.api_models import GenerationRequest
from src.services.question_service import generate_questions

generate_bp = Blueprint("generate_bp", __name__)

GATEWAY_EXTENSION = "gemini_gateway"


def _get_gateway():
    return current_app.extensions[GATEWAY_EXTENSION]


def _collect_files():
    """
    Reads every non-empty entry under the "files" field into memory.
    Returns list[UploadedFile]
    """
    collected = []
    for file_storage in request.files.getlist("files"):
        if not file_storage or not file_storage.filename:
            continue
        collected.append(
            UploadedFile(
                filename=secure_name(file_storage.filename) or "upload",
                content_type=file_storage.mimetype or "application/octet-stream",
                data=file_storage.read(),
            )
        )
    return collected


@generate_bp.route("/generate", methods=["POST"])
async def generate_route():
    """
    Generates assessment questions from pasted text and/or uploaded files.
    """
    settings = current_app.config["QF_SETTINGS"]
    form = request.form

    try:
        question_count = parse_question_count(form.get("questionCount"), settings.MAX_QUESTION_COUNT)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        req_data = GenerationRequest(
            difficulty=form.get("difficulty") or "medium",
            format=form.get("format") or "mcq",
            question_count=question_count,
            model=form.get("model") or None,
            text_input=form.get("textInput") or "",
        )
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False)}), 400

    files = _collect_files()
    invalid = validate_upload_batch(files, settings.MAX_FILES, settings.max_file_size_bytes)
    if invalid:
        message, status = invalid
        return jsonify({"error": message}), status

    try:
        result = await generate_questions(req_data, files, _get_gateway())
    except BaseAppException as e:
        logger.warning(f"Generation request failed: {e.__class__.__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logger.error(f"Unexpected error while generating questions: {e}", exc_info=True)
        return jsonify({"error": "Unexpected server error."}), 500

    return jsonify(result.to_dict()), 200


@generate_bp.route("/models", methods=["GET"])
def list_models_route():
    """Lists the models a client may request."""
    models = list(_get_gateway().list_models())
    return jsonify({"models": models, "default": models[0]}), 200
