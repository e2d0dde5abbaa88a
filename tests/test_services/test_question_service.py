import asyncio

import pytest
from unittest.mock import patch
from pydantic import ValidationError

from conftest import FakeGateway
from qf_utils.file_utils import UploadedFile
from src.domain.errors import ModelNotAllowed, NoMaterialProvided, UnsupportedFormat
from src.domain.models.api_models import GenerationRequest
from src.infrastructure.config import settings
from src.services.material_service import TRUNCATE_LIMIT
from src.services.question_service import generate_questions


class TestGenerateQuestions:
    """End-to-end pipeline tests with a fake gateway."""

    def test_short_easy_scenario(self):
        gateway = FakeGateway()
        material = "Photosynthesis converts light into chemical energy."
        request = GenerationRequest(difficulty="easy", format="short", question_count=2, text_input=material)

        result = asyncio.run(generate_questions(request, [], gateway))

        assert len(result.questions) == 1
        assert result.format == "short"
        assert result.difficulty == "easy"
        assert result.question_count == 2
        assert result.model == "models/gemini-2.5-pro"
        assert result.material_length == len(material)

        (model, payload), = gateway.calls
        assert model == "models/gemini-2.5-pro"
        assert "exactly 2 high-quality questions" in payload.text
        assert "short-answer questions" in payload.text
        assert "foundational recall" in payload.text
        assert material in payload.text

    def test_no_material_fails_before_network_call(self):
        gateway = FakeGateway()
        with pytest.raises(NoMaterialProvided):
            asyncio.run(generate_questions(GenerationRequest(), [], gateway))
        assert gateway.calls == []

    def test_unlisted_model_fails_before_network_call(self):
        gateway = FakeGateway()
        request = GenerationRequest(model="unlisted-model-x", text_input="some material")
        with patch('src.services.question_service.extract_text') as mock_extract:
            with pytest.raises(ModelNotAllowed):
                asyncio.run(generate_questions(request, [UploadedFile("a.txt", "text/plain", b"x")], gateway))
            mock_extract.assert_not_called()
        assert gateway.calls == []

    def test_unsupported_file_fails_before_network_call(self):
        gateway = FakeGateway()
        files = [UploadedFile("slides.pptx", "application/octet-stream", b"PK\x03\x04")]
        with pytest.raises(UnsupportedFormat):
            asyncio.run(generate_questions(GenerationRequest(text_input="x"), files, gateway))
        assert gateway.calls == []

    def test_files_follow_pasted_text(self):
        gateway = FakeGateway(reply='{"questions": []}')
        files = [
            UploadedFile("one.txt", "text/plain", b"first file"),
            UploadedFile("two.md", "", b"second file"),
        ]
        result = asyncio.run(generate_questions(GenerationRequest(text_input="pasted"), files, gateway))

        assert result.questions == []
        payload = gateway.calls[0][1]
        assert "pasted\n\nfirst file\n\nsecond file" in payload.text

    def test_material_length_reports_untruncated_size(self):
        gateway = FakeGateway(reply='{"questions": []}')
        text = "z" * (TRUNCATE_LIMIT + 100)
        result = asyncio.run(generate_questions(GenerationRequest(text_input=text), [], gateway))

        assert result.material_length == TRUNCATE_LIMIT + 100
        assert "[truncated for token limit]" in gateway.calls[0][1].text

    def test_result_serialises_with_camel_case_keys(self):
        gateway = FakeGateway()
        result = asyncio.run(generate_questions(GenerationRequest(text_input="material"), [], gateway))
        data = result.to_dict()
        assert data["questionCount"] is None
        assert data["materialLength"] == len("material")
        assert data["questions"][0]["type"] == "short"


class TestGenerationRequest:
    """Tests for the request entity's own constraints."""

    def test_count_above_ceiling_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(text_input="material", question_count=settings.MAX_QUESTION_COUNT + 1)

    def test_count_at_ceiling_accepted(self):
        request = GenerationRequest(text_input="material", question_count=settings.MAX_QUESTION_COUNT)
        assert request.question_count == settings.MAX_QUESTION_COUNT

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count_rejected(self, count):
        with pytest.raises(ValidationError):
            GenerationRequest(text_input="material", question_count=count)
