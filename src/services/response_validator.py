import json
import re
from typing import List

from pydantic import ValidationError

from qf_utils.logger_utils import logger
from src.domain.errors import MalformedModelOutput
from src.domain.models.api_models import Question

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def _strip_code_fence(raw_text: str) -> str:
    text = raw_text.strip()
    match = _FENCE_RE.match(text)
    return match.group(1) if match else text


def parse_model_output(raw_text: str) -> List[Question]:
    """
    Parse the model's text into questions.

    Missing `questions` means the model produced none. Optional fields are
    defaulted, extra fields dropped; a question missing prompt, type,
    difficulty or answer makes the whole payload malformed. The raw text is
    kept on the error so the caller can show it.
    """
    try:
        data = json.loads(_strip_code_fence(raw_text))
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"Failed to parse model output as JSON: {e}")
        raise MalformedModelOutput(raw_text, reason=str(e)) from e

    if not isinstance(data, dict):
        logger.error(f"Model output is JSON but not an object: {type(data).__name__}")
        raise MalformedModelOutput(raw_text, reason="top-level value is not an object")

    items = data.get("questions")
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedModelOutput(raw_text, reason="'questions' is not an array")

    try:
        return [Question.model_validate(item) for item in items]
    except ValidationError as e:
        logger.error(f"Model output failed question validation: {e.error_count()} error(s)")
        raise MalformedModelOutput(raw_text, reason=str(e)) from e
