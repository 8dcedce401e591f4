import logging

from typing import Annotated
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

import codecritic.errors as errors
from codecritic.constants import JSON_MIME_TYPE
from codecritic.dependencies import get_gemini_client, get_settings
from codecritic.gemini_client import GeminiClient, extract_candidate_text
from codecritic.prompts import build_proxy_prompt
from codecritic.schemas import ReviewRequest
from codecritic.utils import require_code

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title="Code Review Proxy",
    description="Forwards code review requests to Gemini with a server-held API key.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["POST"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/health", tags=["Health"])
async def health():
    return {"ok": True}


@app.post("/review", tags=["Review"])
async def review_proxy(request: Request, gemini: Annotated[GeminiClient, Depends(get_gemini_client)]):

    try:
        review_request = ReviewRequest.model_validate(await request.json())
    except ValueError as e:
        logging.error(f"Invalid review request body: {e}")
        return error_response(500, "Request body must be a JSON object with a 'code' string.")

    if not gemini.api_key:
        logging.error("GEMINI_API_KEY is not configured")
        return error_response(500, str(errors.MissingCredentialError()))

    try:
        require_code(review_request.code)
    except errors.ValidationError:
        return error_response(400, "No code provided")

    try:
        upstream = await gemini.generate_content(build_proxy_prompt(review_request.code), json_mode=True)
    except errors.ReviewError as e:
        return error_response(500, str(e))

    if not upstream.is_success:
        logging.error(f"Gemini API Error: {upstream.status_code} {upstream.text[:500]}")
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.headers.get("content-type", JSON_MIME_TYPE),
        )

    try:
        response_text = extract_candidate_text(upstream.json())
    except ValueError:
        logging.error(f"Gemini returned a non-JSON body: {upstream.text[:500]}")
        return error_response(500, "Gemini returned a non-JSON body")
    except errors.EmptyResponseError as e:
        logging.error(f"Unexpected Gemini response: {upstream.text[:500]}")
        return error_response(500, str(e))

    # Strict JSON mode was requested upstream, so the text is relayed as-is
    return Response(content=response_text, status_code=200, media_type=JSON_MIME_TYPE)
