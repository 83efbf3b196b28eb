"""JSON-RPC envelope for the randomness service."""

from randomorg.rpc.json_rpc import JsonRpc
from randomorg.rpc.models import (
    JSONRPC_VERSION,
    ParameterMapping,
    RandomData,
    RpcCall,
    RpcPayload,
    RpcResponse,
    ServiceEnvelope,
    decode_envelope,
    new_request_id,
)

__all__ = [
    "JsonRpc",
    "JSONRPC_VERSION",
    "ParameterMapping",
    "RandomData",
    "RpcCall",
    "RpcPayload",
    "RpcResponse",
    "ServiceEnvelope",
    "decode_envelope",
    "new_request_id",
]
