"""
randomorg - validated JSON-RPC client for the random.org API
"""

__version__ = "0.1.0"
__logo__ = "🎲"

from randomorg.client import CharSet, RandomOrg, Usage
from randomorg.rpc import JsonRpc, RandomData, RpcCall, ServiceEnvelope
from randomorg.utils.exceptions import (
    DecodeError,
    RandomOrgError,
    ServiceError,
    StructuralMismatchError,
    TransportError,
    ValidationError,
)
from randomorg.validation import Multiform, Uniform

__all__ = [
    "__version__",
    "CharSet",
    "RandomOrg",
    "Usage",
    "JsonRpc",
    "RandomData",
    "RpcCall",
    "ServiceEnvelope",
    "DecodeError",
    "RandomOrgError",
    "ServiceError",
    "StructuralMismatchError",
    "TransportError",
    "ValidationError",
    "Multiform",
    "Uniform",
]
