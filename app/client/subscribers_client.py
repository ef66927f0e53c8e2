"""Subscribers Client — async httpx caller for POST /api/subscribers.

Invariants:
    - Invalid emails rejected locally with ValidationError; no request is sent
    - Method and path come from SUBSCRIBERS_CREATE, never literals
    - 201 → SubscriberResponse; 400 → ValidationError; 409 → ConflictError;
      anything else (or transport failure) → InternalError("Failed to subscribe")

Design Decisions:
    - Same error types as the service: callers handle one hierarchy whether they
      call the service in-process or over HTTP
    - Optional injected httpx.AsyncClient: tests route it to the ASGI app, production
      code gets a short-lived client per call
"""

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.api.contract import SUBSCRIBERS_CREATE, build_url
from app.core.errors import ConflictError, InternalError, ValidationError
from app.schemas.subscriber import SubscriberResponse, parse_subscriber_create

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to subscribe"


class SubscribersClient:
    """Caller side of the subscription intake contract."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    async def subscribe(self, email: str) -> SubscriberResponse:
        """Validate locally, POST, and map the response to a result or error."""
        request = parse_subscriber_create({"email": email})
        contract = SUBSCRIBERS_CREATE
        url = self.base_url + build_url(contract.path)
        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    contract.method, url, json=request.model_dump(),
                    timeout=self.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(
                        contract.method, url, json=request.model_dump(),
                    )
        except httpx.HTTPError as e:
            logger.error(f"Subscribe request failed: {e}")
            raise InternalError(FAILURE_MESSAGE) from e
        return self._parse(response)

    def _parse(self, response: httpx.Response) -> SubscriberResponse:
        schema = SUBSCRIBERS_CREATE.responses.get(response.status_code)
        if schema is None or response.status_code >= 500:
            raise InternalError(FAILURE_MESSAGE)
        try:
            body = schema.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error(
                f"Unexpected body for status {response.status_code}: {e}",
                extra={"status_code": response.status_code},
            )
            raise InternalError(FAILURE_MESSAGE) from e
        if response.status_code == 400:
            raise ValidationError(body.message, body.field)
        if response.status_code == 409:
            raise ConflictError(body.message)
        return body
