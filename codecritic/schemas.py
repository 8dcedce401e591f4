from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewRequest(BaseModel):
    code: str = Field(..., description="The code snippet to be reviewed.")


class ReviewResult(BaseModel):
    review: str = Field("", description="Markdown bullet points, one per line.")
    updated_code: str = Field(
        "", alias="updatedCode", description="Corrected code, empty when no changes are needed."
    )
    score: int = Field(0, ge=0, le=100, description="Quality of the original code.")
    language: Optional[str] = Field(None, description="Detected programming language.")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("review", mode="before")
    @classmethod
    def _join_review(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, list):
            return "\n".join(f"* {item}" for item in value)
        return value

    @field_validator("updated_code", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError("score must be a number")
        try:
            if isinstance(value, str) and "/" in value:
                # "8/10" style ratings are rescaled to 0..100
                numerator, denominator = (float(piece) for piece in value.split("/", 1))
                if denominator <= 0:
                    raise ValueError("score denominator must be positive")
                value = numerator / denominator * 100
            value = round(float(value))
        except OverflowError as e:
            raise ValueError("score must be finite") from e
        return min(max(value, 0), 100)


class GeminiPart(BaseModel):
    text: Optional[str] = None


class GeminiContent(BaseModel):
    parts: List[GeminiPart] = []


class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None


class GeminiResponse(BaseModel):
    """The slice of a generateContent reply this project reads."""

    candidates: List[GeminiCandidate] = []
