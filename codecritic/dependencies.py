from functools import lru_cache
from typing import Annotated, Awaitable, Callable

from fastapi import Depends

import codecritic.config as config
from codecritic.gemini_client import GeminiClient
from codecritic.proxy_client import ReviewProxyClient
from codecritic.schemas import ReviewResult

Reviewer = Callable[[str], Awaitable[ReviewResult]]


@lru_cache
def get_settings():
    return config.Settings()


def get_gemini_client(settings: Annotated[config.Settings, Depends(get_settings)]) -> GeminiClient:
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        api_base=settings.GEMINI_API_BASE,
        timeout=settings.REQUEST_TIMEOUT,
    )


def get_reviewer(settings: config.Settings) -> Reviewer:
    # Front end wiring: proxy when configured, direct Gemini otherwise (development only)
    if settings.REVIEW_PROXY_URL:
        return ReviewProxyClient(settings.REVIEW_PROXY_URL, timeout=settings.REQUEST_TIMEOUT).request_review
    return get_gemini_client(settings).request_review
