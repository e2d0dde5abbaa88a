from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.infrastructure.config import settings


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionFormat(str, Enum):
    MCQ = "mcq"
    SHORT = "short"
    LONG = "long"


class GenerationRequest(BaseModel):
    """Request model for the question generation endpoint."""
    difficulty: str = Field("medium", description="Requested difficulty (easy, medium, hard).")
    format: str = Field("mcq", description="Requested question format (mcq, short, long).")
    question_count: Optional[int] = Field(
        None, gt=0, le=settings.MAX_QUESTION_COUNT, description="Exact number of questions, if any."
    )
    model: Optional[str] = Field(None, description="Model identifier; defaults to the first allowed model.")
    text_input: str = Field("", description="Course material pasted by the teacher.")


class Question(BaseModel):
    """
    Represents a single generated question.
    """
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    prompt: str
    type: QuestionFormat
    difficulty: Difficulty
    answer: str
    options: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _options_only_for_mcq(self) -> "Question":
        if self.type != QuestionFormat.MCQ.value and self.options:
            self.options = []
        return self


class GenerationResult(BaseModel):
    """Response model returned once per generation request."""
    model_config = ConfigDict(populate_by_name=True)

    model: str
    difficulty: str
    format: str
    question_count: Optional[int] = Field(None, alias="questionCount")
    material_length: int = Field(..., alias="materialLength")
    questions: List[Question] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
