"""JSON-RPC envelope: frame a call, send it once, decode the result."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from randomorg.rpc.models import RpcCall, RpcErrorObject, RpcPayload, RpcResponse
from randomorg.utils.exceptions import DecodeError, RandomOrgError, ServiceError, TransportError, sanitize_error_message

T = TypeVar("T")

_HEADERS = {"Content-Type": "application/json"}


class JsonRpc:
    """Single-attempt JSON-RPC caller over a reusable ``httpx.AsyncClient``.

    The client is shared read-only across calls, so concurrent ``execute``
    calls are safe. Per-call state (payload, id) is local to each call.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, *, timeout: float | None = None):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> JsonRpc:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def execute(self, endpoint: str, call: RpcCall, decode: Callable[[Any], T]) -> T:
        """Send ``call`` to ``endpoint`` and return ``decode(result)``.

        Raises:
            TransportError: connection failure or HTTP error status.
            DecodeError: body is not JSON, lacks ``id``/``result``, carries a
                mismatched id, or ``decode`` rejects the result.
            ServiceError: the service answered with a JSON-RPC error object.
        """
        payload = RpcPayload.from_call(call)
        logger.debug("RPC call method={} id={}", payload.method, payload.id)

        try:
            resp = await self._client.post(endpoint, json=payload.to_dict(), headers=_HEADERS)
        except httpx.RequestError as exc:
            raise TransportError(
                f"request to {endpoint} failed: {sanitize_error_message(str(exc))}",
                endpoint=endpoint,
            ) from exc

        status_code = int(getattr(resp, "status_code", 0) or 0)
        if status_code >= 400:
            raise TransportError(
                f"http error {status_code} from {endpoint}",
                status_code=status_code,
                endpoint=endpoint,
            )

        try:
            body = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"non-json response body for {payload.method}", code="BAD_RESPONSE_BODY") from exc

        logger.trace("RPC response method={} body={}", payload.method, sanitize_error_message(str(body)))

        rpc_resp = self._parse_response(body, payload.method)
        if rpc_resp.id != payload.id:
            raise DecodeError(
                f"response id {rpc_resp.id} does not match request id {payload.id}",
                code="CORRELATION_MISMATCH",
                details={"request_id": payload.id, "response_id": rpc_resp.id},
            )

        try:
            return decode(rpc_resp.result)
        except RandomOrgError:
            raise
        except Exception as exc:
            raise DecodeError(f"decoding {payload.method} result failed: {exc}") from exc

    @staticmethod
    def _parse_response(body: Any, method: str) -> RpcResponse:
        if isinstance(body, dict) and body.get("error") is not None:
            try:
                err = RpcErrorObject.model_validate(body["error"])
            except PydanticValidationError:
                err = RpcErrorObject(message=str(body["error"]))
            logger.warning("RPC method {} failed with service code {}: {}", method, err.code, err.message)
            raise ServiceError(err.code, err.message, err.data)
        try:
            return RpcResponse.model_validate(body)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"response for {method} is not a JSON-RPC result envelope",
                code="BAD_RESPONSE_SHAPE",
            ) from exc
