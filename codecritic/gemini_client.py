import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as SchemaError

import codecritic.errors as errors
from codecritic.constants import GEMINI_API_BASE, GEMINI_MODEL, JSON_MIME_TYPE
from codecritic.prompts import build_review_prompt
from codecritic.schemas import GeminiResponse, ReviewResult
from codecritic.utils import parse_review_text


def build_payload(prompt: str, json_mode: bool = False) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
    if json_mode:
        payload["generationConfig"] = {"response_mime_type": JSON_MIME_TYPE}
    return payload


def extract_candidate_text(body: Any) -> str:
    try:
        response = GeminiResponse.model_validate(body)
    except SchemaError as e:
        logging.error(f"Unexpected Gemini response shape: {e}")
        raise errors.EmptyResponseError("Gemini response has an unexpected shape") from e

    if not response.candidates:
        raise errors.EmptyResponseError("Gemini returned no candidates")

    content = response.candidates[0].content
    if content is None or not content.parts or content.parts[0].text is None:
        raise errors.EmptyResponseError("Gemini candidate has no text")

    return content.parts[0].text


class GeminiClient:
    """
    Thin async wrapper around the Gemini generateContent endpoint.

    One POST per call, no retries. The credential travels as the ``key``
    query parameter.
    """

    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_MODEL,
        api_base: str = GEMINI_API_BASE,
        timeout: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def generate_content(self, prompt: str, json_mode: bool = False) -> httpx.Response:
        if not self.api_key:
            raise errors.MissingCredentialError()

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                return await client.post(
                    self.url,
                    params={"key": self.api_key},
                    json=build_payload(prompt, json_mode),
                )
            except httpx.RequestError as e:
                logging.error(f"Could not reach Gemini: {type(e).__name__}")
                raise errors.TransportError(reason=f"Could not reach the model endpoint ({type(e).__name__})") from e

    async def complete(self, prompt: str, json_mode: bool = False) -> str:
        response = await self.generate_content(prompt, json_mode)

        if not response.is_success:
            logging.error(f"Gemini API Error: {response.status_code} {response.reason_phrase}")
            raise errors.TransportError(response.status_code, response.reason_phrase)

        try:
            body = response.json()
        except ValueError as e:
            logging.error(f"Gemini returned a non-JSON body: {response.text[:500]!r}")
            raise errors.EmptyResponseError("Gemini returned a non-JSON body") from e

        return extract_candidate_text(body)

    async def request_review(self, code: str) -> ReviewResult:
        text = await self.complete(build_review_prompt(code))
        return parse_review_text(text)
