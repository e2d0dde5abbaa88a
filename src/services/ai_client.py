from typing import Any, Dict, Optional, Tuple

import httpx

from qf_utils.logger_utils import logger
from src.domain.errors import (
    ContentBlocked,
    EmptyGatewayResponse,
    GatewayError,
    GatewayNotConfigured,
    ModelNotAllowed,
)
from src.infrastructure.config import GatewayConfig
from src.services.prompt_builder import PromptPayload

MODEL_PREFIX = "models/"

# Upstream bodies can be large HTML error pages
_MAX_ERROR_BODY_CHARS = 2000


class GeminiGateway:
    """
    Thin async client around the Gemini generateContent endpoint.

    One outbound call per `generate` invocation, no retries. Configuration is
    fixed at construction; pass `client` to reuse a connection pool or to
    plug in a mock transport.
    """

    def __init__(self, config: GatewayConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    # -------------------------------------------------------------------------
    # Model selection
    # -------------------------------------------------------------------------
    def list_models(self) -> Tuple[str, ...]:
        return self.config.allowed_models

    def sanitize_model(self, raw_model: Optional[str]) -> str:
        """
        Map a user-supplied model name onto the allow-list.
        No model means the first allowed one; unknown names are rejected.
        """
        raw_model = (raw_model or "").strip()
        if not raw_model:
            return self.config.allowed_models[0]

        candidate = raw_model if raw_model.startswith(MODEL_PREFIX) else f"{MODEL_PREFIX}{raw_model}"
        if candidate not in self.config.allowed_models:
            logger.warning(f"Rejected model outside the allow list: '{raw_model}'")
            raise ModelNotAllowed(raw_model)
        return candidate

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------
    def _build_body(self, payload: PromptPayload) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": payload.text}],
                }
            ],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_output_tokens,
                "responseMimeType": "application/json",
                "responseSchema": payload.response_schema,
            },
        }

    async def generate(self, model: str, payload: PromptPayload) -> str:
        """
        Send the prompt to `model` and return the first text part of the reply.

        Raises:
            GatewayNotConfigured: no API key, nothing was sent.
            GatewayError: transport failure, timeout or non-2xx status.
            ContentBlocked: the provider refused the prompt.
            EmptyGatewayResponse: no text part in the first candidate.
        """
        if not self.is_configured:
            raise GatewayNotConfigured()

        url = f"{self.config.base_url}/{model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.config.api_key,
        }
        body = self._build_body(payload)

        logger.info(f"→ Calling {model} (prompt_chars={len(payload.text)})")
        try:
            if self._client is not None:
                response = await self._client.post(
                    url, json=body, headers=headers, timeout=self.config.timeout_seconds
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                    response = await client.post(url, json=body, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request to {model} timed out after {self.config.timeout_seconds}s")
            raise GatewayError(None, "request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request to {model} failed: {e}", exc_info=True)
            raise GatewayError(None, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            error_body = response.text[:_MAX_ERROR_BODY_CHARS]
            logger.error(f"Gemini API error ({response.status_code}) for {model}")
            raise GatewayError(response.status_code, error_body)

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(response.status_code, "response body is not valid JSON") from e

        return extract_text_part(data)


def extract_text_part(data: Any) -> str:
    """
    Pull the generated text out of a generateContent response envelope.
    """
    if not isinstance(data, dict):
        raise EmptyGatewayResponse()

    feedback = data.get("promptFeedback") or {}
    block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
    if block_reason:
        logger.warning(f"Gemini blocked the prompt: {block_reason}")
        raise ContentBlocked(str(block_reason))

    candidates = data.get("candidates")
    if not isinstance(candidates, list):
        candidates = []
    first = candidates[0] if candidates and isinstance(candidates[0], dict) else {}
    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        parts = []

    for part in parts:
        text = part.get("text") if isinstance(part, dict) else None
        if isinstance(text, str) and text.strip():
            return text.strip()

    if first.get("finishReason") == "SAFETY":
        logger.warning("Gemini stopped generation for safety reasons")
        raise ContentBlocked("SAFETY")

    raise EmptyGatewayResponse()
