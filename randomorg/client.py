"""
Bindings for the randomness service's generate* methods.

Each method validates its parameters locally, builds the parameter mapping
(including ``apiKey``), performs one JSON-RPC call and returns the decoded
``RandomData``. Usage counters from the last response are kept on
``last_usage`` for callers that want to honour the advisory delay.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable

from loguru import logger

from randomorg.config.schema import Config
from randomorg.rpc.json_rpc import JsonRpc
from randomorg.rpc.models import ParameterMapping, RandomData, RpcCall, ServiceEnvelope, decode_envelope
from randomorg.validation import pipelines
from randomorg.validation.seq_bound import SequenceBound, as_sequence_bound, to_wire


@dataclass(frozen=True, slots=True)
class CharSet:
    """Characters a generated string may contain."""

    NUMBER: ClassVar[CharSet]
    LOWER_ALPHABET: ClassVar[CharSet]
    UPPER_ALPHABET: ClassVar[CharSet]

    characters: str

    def __post_init__(self) -> None:
        if not self.characters:
            raise ValueError("character set must not be empty")

    def __add__(self, other: CharSet) -> CharSet:
        return CharSet(self.characters + other.characters)

    @classmethod
    def custom(cls, characters: str) -> CharSet:
        return cls(characters)


CharSet.NUMBER = CharSet("0123456789")
CharSet.LOWER_ALPHABET = CharSet("abcdefghijklmnopqrstuvwxyz")
CharSet.UPPER_ALPHABET = CharSet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass(frozen=True, slots=True)
class Usage:
    """Quota counters reported with every result; advisory only."""

    requests_left: int
    bits_used: int
    bits_left: int
    advisory_delay_millis: int


class RandomOrg:
    """Typed client for generateIntegers, generateStrings, generateGaussians,
    generateUUIDs and generateIntegerSequences."""

    def __init__(self, api_key: str, base_url: str, json_rpc: JsonRpc):
        self.api_key = api_key
        self.base_url = base_url
        self.json_rpc = json_rpc
        self.last_usage: Usage | None = None

    @classmethod
    def from_config(cls, config: Config, json_rpc: JsonRpc | None = None) -> RandomOrg:
        if json_rpc is None:
            json_rpc = JsonRpc(timeout=config.timeout_seconds)
        return cls(config.api_key, config.base_url, json_rpc)

    async def aclose(self) -> None:
        await self.json_rpc.aclose()

    async def __aenter__(self) -> RandomOrg:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _params(self) -> ParameterMapping:
        return ParameterMapping().set("apiKey", self.api_key)

    async def _call(self, method: str, params: ParameterMapping, data_type: Any) -> RandomData[Any]:
        call = RpcCall(method, params)
        envelope: ServiceEnvelope[Any] = await self.json_rpc.execute(self.base_url, call, decode_envelope(data_type))
        self.last_usage = Usage(
            requests_left=envelope.requests_left,
            bits_used=envelope.bits_used,
            bits_left=envelope.bits_left,
            advisory_delay_millis=envelope.advisory_delay_millis,
        )
        logger.debug(
            "{} ok: requests_left={} bits_left={} advisory_delay={}ms",
            method,
            envelope.requests_left,
            envelope.bits_left,
            envelope.advisory_delay_millis,
        )
        return envelope.random

    async def generate_integers(
        self, n: int, min: int, max: int, replacement: bool = True
    ) -> RandomData[list[int]]:
        n, min, max = pipelines.generate_integers(n, min, max)
        params = (
            self._params()
            .set("n", n)
            .set("min", min)
            .set("max", max)
            .set("replacement", replacement)
        )
        return await self._call("generateIntegers", params, list[int])

    async def generate_strings(
        self,
        n: int,
        length: int,
        characters: CharSet | str,
        replacement: bool = True,
    ) -> RandomData[list[str]]:
        n, length = pipelines.generate_strings(n, length)
        if isinstance(characters, str):
            characters = CharSet.custom(characters)
        params = (
            self._params()
            .set("n", n)
            .set("length", length)
            .set("characters", characters.characters)
            .set("replacement", replacement)
        )
        return await self._call("generateStrings", params, list[str])

    async def generate_gaussians(
        self, n: int, mean: float, std_dev: float, sig_digits: int
    ) -> RandomData[list[float]]:
        n, mean, std_dev, sig_digits = pipelines.generate_gaussians(n, mean, std_dev, sig_digits)
        params = (
            self._params()
            .set("n", n)
            .set("mean", mean)
            .set("standardDeviation", std_dev)
            .set("significantDigits", sig_digits)
        )
        return await self._call("generateGaussians", params, list[float])

    async def generate_uuids(self, n: int) -> RandomData[list[uuid.UUID]]:
        n = pipelines.generate_uuids(n)
        return await self._call("generateUUIDs", self._params().set("n", n), list[uuid.UUID])

    async def generate_integer_sequences(
        self,
        n: int,
        length: int | Iterable[int] | SequenceBound,
        min: int | Iterable[int] | SequenceBound,
        max: int | Iterable[int] | SequenceBound,
        replacement: bool = True,
    ) -> RandomData[list[list[int]]]:
        n, length, min, max = pipelines.generate_integer_sequences(
            n, as_sequence_bound(length), as_sequence_bound(min), as_sequence_bound(max)
        )
        params = (
            self._params()
            .set("n", n)
            .set("length", to_wire(length))
            .set("min", to_wire(min))
            .set("max", to_wire(max))
            .set("replacement", replacement)
        )
        return await self._call("generateIntegerSequences", params, list[list[int]])
