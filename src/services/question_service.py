from typing import Sequence

from qf_utils.file_utils import UploadedFile
from qf_utils.logger_utils import logger
from src.domain.models.api_models import GenerationRequest, GenerationResult
from src.services.ai_client import GeminiGateway
from src.services.material_service import aggregate_material
from src.services.prompt_builder import build_prompt
from src.services.response_validator import parse_model_output
from src.utils.text_extractor import extract_text


async def generate_questions(
    request: GenerationRequest,
    files: Sequence[UploadedFile],
    gateway: GeminiGateway,
) -> GenerationResult:
    """
    Runs the full pipeline for one request: model selection, extraction,
    aggregation, prompt rendering, the model call and output validation.

    Model and material problems surface before the model API is contacted.
    """
    selected_model = gateway.sanitize_model(request.model)
    logger.info(
        f"Generating '{request.format}' questions at '{request.difficulty}' difficulty "
        f"with {selected_model} (files={len(files)}, count={request.question_count})"
    )

    extracted = [extract_text(uploaded) for uploaded in files]
    material = aggregate_material(request.text_input, extracted)
    logger.info(f"Material ready: {material.original_length} chars (truncated={material.truncated})")

    payload = build_prompt(
        difficulty=request.difficulty,
        question_format=request.format,
        question_count=request.question_count,
        material=material.text,
    )
    raw_text = await gateway.generate(selected_model, payload)
    questions = parse_model_output(raw_text)

    logger.info(f"Model {selected_model} returned {len(questions)} question(s)")
    return GenerationResult(
        model=selected_model,
        difficulty=request.difficulty,
        format=request.format,
        question_count=request.question_count,
        material_length=material.original_length,
        questions=questions,
    )
