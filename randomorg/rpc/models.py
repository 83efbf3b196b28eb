"""JSON-RPC 2.0 wire models for the randomness service.

Pure data: no I/O. Requests are plain dataclasses serialised with
``to_dict``; responses are decoded with Pydantic.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from randomorg.utils.exceptions import DecodeError

T = TypeVar("T")

JSONRPC_VERSION = "2.0"
MAX_REQUEST_ID = 2**32 - 1

JsonValue = Any
_SCALAR_TYPES = (type(None), bool, int, float, str)


def new_request_id() -> int:
    """Fresh uniformly random uint32 correlation id."""
    return secrets.randbits(32)


def _check_json_value(name: str, value: Any) -> Any:
    if isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return [_check_json_value(f"{name}[{i}]", item) for i, item in enumerate(value)]
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{name}: object keys must be strings, got {key!r}")
            out[key] = _check_json_value(f"{name}.{key}", item)
        return out
    raise TypeError(f"{name}: unsupported parameter value type {type(value).__name__}")


class ParameterMapping:
    """Ordered parameter name -> JSON value container with unique keys."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Any] | None = None):
        self._items: dict[str, Any] = {}
        for name, value in (items or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> ParameterMapping:
        if not isinstance(name, str) or not name:
            raise TypeError(f"parameter name must be a non-empty string, got {name!r}")
        if name in self._items:
            raise ValueError(f"duplicate parameter: {name}")
        self._items[name] = _check_json_value(name, value)
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __getitem__(self, name: str) -> Any:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ParameterMapping({self._items!r})"

    def to_dict(self) -> dict[str, Any]:
        return dict(self._items)


@dataclass(frozen=True, slots=True)
class RpcCall:
    """A method name and its parameters, consumed once by the envelope."""

    method: str
    params: ParameterMapping = field(default_factory=ParameterMapping)


@dataclass(frozen=True, slots=True)
class RpcPayload:
    """Wire request: ``{"jsonrpc": "2.0", "method", "params", "id"}``."""

    method: str
    params: ParameterMapping
    id: int

    @classmethod
    def from_call(cls, call: RpcCall, request_id: int | None = None) -> RpcPayload:
        return cls(
            method=call.method,
            params=call.params,
            id=new_request_id() if request_id is None else request_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": self.method,
            "params": self.params.to_dict(),
            "id": self.id,
        }


class RpcErrorObject(BaseModel):
    """JSON-RPC error member returned by the service."""
    code: int | None = None
    message: str = ""
    data: Any = None


class RpcResponse(BaseModel):
    """Wire response: ``{"id", "result"}``; ``result`` stays opaque until decoded."""
    id: StrictInt = Field(ge=0, le=MAX_REQUEST_ID)
    result: Any


class RandomData(BaseModel, Generic[T]):
    """Generated values plus the service's completion timestamp."""
    model_config = ConfigDict(populate_by_name=True)

    completion_time: str = Field(alias="completionTime")
    data: T


class ServiceEnvelope(BaseModel, Generic[T]):
    """Decoded ``result`` of a generate* call: usage counters plus the random data."""
    model_config = ConfigDict(populate_by_name=True)

    requests_left: int = Field(alias="requestsLeft", ge=0, le=MAX_REQUEST_ID)
    bits_used: int = Field(alias="bitsUsed", ge=0)
    bits_left: int = Field(alias="bitsLeft", ge=0)
    advisory_delay_millis: int = Field(alias="advisoryDelay", ge=0)
    random: RandomData[T]


def decode_envelope(data_type: Any) -> Callable[[Any], ServiceEnvelope[Any]]:
    """Build a decode strategy for ``ServiceEnvelope[data_type]``."""
    model = ServiceEnvelope[data_type]

    def decode(value: Any) -> ServiceEnvelope[Any]:
        try:
            return model.model_validate(value)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"unexpected result shape for {model.__name__}: {exc.error_count()} error(s)",
                code="RESULT_SHAPE_MISMATCH",
                details={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            ) from exc

    return decode
