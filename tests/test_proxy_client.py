import asyncio
import json

import httpx
import pytest

import codecritic.config as config
import codecritic.errors as errors
from codecritic.dependencies import get_reviewer
from codecritic.gemini_client import GeminiClient
from codecritic.proxy_client import ReviewProxyClient


def test_proxy_response_is_validated():
    sent = []

    def _handler(request):
        sent.append(json.loads(request.content))
        return httpx.Response(200, text='{"language":"Python","review":"* ok","updatedCode":"","score":"8"}')

    proxy = ReviewProxyClient("http://proxy.test/review", transport=httpx.MockTransport(_handler))
    result = asyncio.run(proxy.request_review("print('hi')"))

    assert sent == [{"code": "print('hi')"}]
    assert result.language == "Python"
    assert result.score == 8


def test_proxy_error_status():
    def _handler(request):
        return httpx.Response(500, json={"error": "API key is not configured on the server."})

    proxy = ReviewProxyClient("http://proxy.test/review", transport=httpx.MockTransport(_handler))

    with pytest.raises(errors.TransportError) as exc_info:
        asyncio.run(proxy.request_review("print('hi')"))

    assert exc_info.value.status_code == 500


def test_reviewer_wiring():
    proxied = get_reviewer(config.Settings(REVIEW_PROXY_URL="http://proxy.test/review"))
    direct = get_reviewer(config.Settings(REVIEW_PROXY_URL="", GEMINI_API_KEY="dev-key"))

    assert isinstance(proxied.__self__, ReviewProxyClient)
    assert isinstance(direct.__self__, GeminiClient)
    assert direct.__self__.api_key == "dev-key"
