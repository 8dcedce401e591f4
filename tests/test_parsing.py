import pytest
from pydantic import ValidationError

import codecritic.errors as errors
from codecritic.prompts import build_proxy_prompt, build_review_prompt
from codecritic.schemas import ReviewResult
from codecritic.utils import parse_review_text, require_code, strip_code_fences


def test_review_prompt_embeds_code_in_fence():
    code = "function f() { return {a: 1}; }"
    prompt = build_review_prompt(code)

    assert f"```\n{code}\n```" in prompt
    assert '"updatedCode"' in prompt
    assert "XSS vulnerabilities" in prompt
    assert prompt == build_review_prompt(code)


def test_proxy_prompt_asks_for_language():
    prompt = build_proxy_prompt("")

    assert '"language"' in prompt
    assert "```\n\n```" in prompt


def test_strip_code_fences_keeps_inner_fences():
    text = '```json\n{"review": "* use ```py``` blocks"}\n```'

    assert strip_code_fences(text) == '{"review": "* use ```py``` blocks"}'
    assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


def test_missing_fields_default():
    result = parse_review_text('{"review": "* ok"}')

    assert result.updated_code == ""
    assert result.score == 0
    assert result.language is None


def test_score_is_coerced_and_clamped():
    assert ReviewResult.model_validate({"score": "85"}).score == 85
    assert ReviewResult.model_validate({"score": 8.6}).score == 9
    assert ReviewResult.model_validate({"score": 150}).score == 100
    assert ReviewResult.model_validate({"score": "70/100"}).score == 70

    with pytest.raises(ValidationError):
        ReviewResult.model_validate({"score": "excellent"})


def test_list_review_is_joined_into_bullets():
    result = ReviewResult.model_validate({"review": ["first", "second"], "updatedCode": None})

    assert result.review == "* first\n* second"
    assert result.updated_code == ""


def test_dump_uses_wire_names():
    dumped = ReviewResult(review="* ok", updatedCode="x", score=5).model_dump(by_alias=True)

    assert dumped == {"review": "* ok", "updatedCode": "x", "score": 5, "language": None}


def test_non_object_is_malformed():
    with pytest.raises(errors.MalformedResponseError):
        parse_review_text("[1, 2, 3]")
    with pytest.raises(errors.MalformedResponseError):
        parse_review_text('{"score": "excellent"}')


def test_require_code():
    assert require_code("  x = 1\n") == "x = 1"
    with pytest.raises(errors.ValidationError):
        require_code(" \n ")


def test_fractional_scores_are_rescaled():
    assert ReviewResult.model_validate({"score": "8/10"}).score == 80
    assert ReviewResult.model_validate({"score": " 7 / 20 "}).score == 35

    with pytest.raises(ValidationError):
        ReviewResult.model_validate({"score": "3/0"})
    with pytest.raises(ValidationError):
        ReviewResult.model_validate({"score": "good/10"})
