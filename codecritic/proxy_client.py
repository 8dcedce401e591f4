import logging
from typing import Optional

import httpx

import codecritic.errors as errors
from codecritic.schemas import ReviewResult
from codecritic.utils import parse_review_text


class ReviewProxyClient:
    """Sends ``{code}`` to the review proxy so no credential lives on the client."""

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def request_review(self, code: str) -> ReviewResult:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.url, json={"code": code})
            except httpx.RequestError as e:
                logging.error(f"Could not reach review proxy at {self.url}: {e}")
                raise errors.TransportError(reason="Could not reach the review service") from e

        if not response.is_success:
            logging.error(f"Review proxy error: {response.status_code} {response.text[:500]}")
            raise errors.TransportError(response.status_code, response.reason_phrase)

        return parse_review_text(response.text)
