"""Contract call descriptions and per-call batch results.

A batched read returns one CallResult per call, in call order. CallResult is a
tagged union (CallSuccess | CallFailure) so a single failed call inside a batch
is data, not an exception; callers pick a policy per field with unwrap()
(structural fields) or value_or() (fields that may degrade).
"""
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from truemarkets_agg.providers.core.exceptions import BatchCallError


@dataclass(frozen=True, eq=False)
class ContractFunction:
    """A read-only function entry taken from a contract ABI."""

    name: str
    abi_entry: Mapping[str, Any]

    @classmethod
    def from_abi(cls, abi: Sequence[Mapping[str, Any]], name: str) -> "ContractFunction":
        for entry in abi:
            if entry.get("type") == "function" and entry.get("name") == name:
                return cls(name, entry)
        raise KeyError(f"function {name!r} not found in ABI")

    @property
    def input_types(self) -> list[str]:
        return [param["type"] for param in self.abi_entry.get("inputs", [])]

    @property
    def output_types(self) -> list[str]:
        return [param["type"] for param in self.abi_entry.get("outputs", [])]


@dataclass(frozen=True)
class ContractCall:
    """One read against one contract; the unit of a batched read."""

    address: str
    function: ContractFunction
    args: tuple[Any, ...] = ()

    @property
    def label(self) -> str:
        return f"{self.function.name}@{self.address}"


@dataclass(frozen=True)
class CallSuccess:
    result: Any

    ok = True

    def unwrap(self, field_name: str) -> Any:
        return self.result

    def value_or(self, default: Any) -> Any:
        return self.result


@dataclass(frozen=True)
class CallFailure:
    error: str

    ok = False

    def unwrap(self, field_name: str) -> Any:
        raise BatchCallError(field_name, self.error)

    def value_or(self, default: Any) -> Any:
        return default


CallResult = CallSuccess | CallFailure
