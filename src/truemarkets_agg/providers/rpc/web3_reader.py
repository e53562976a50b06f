"""Contract reader backed by web3.py.

Single reads are plain contract calls. Batched reads go through Multicall3
`aggregate3` with allowFailure set on every call, so one reverting call comes
back as a CallFailure instead of reverting the whole batch.
"""
import logging
from collections.abc import Sequence
from typing import Any

from aiohttp import ClientTimeout
from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import to_bytes
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from truemarkets_agg.providers.core import (CallFailure, CallResult,
                                            CallSuccess, ContractCall,
                                            ContractFunction,
                                            ContractReaderABC,
                                            ContractReadError)

logger = logging.getLogger(__name__)

# Multicall3 is deployed at the same address on every EVM chain
MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"

MULTICALL3_ABI = [
    {
        "inputs": [
            {
                "components": [
                    {"name": "target", "type": "address"},
                    {"name": "allowFailure", "type": "bool"},
                    {"name": "callData", "type": "bytes"},
                ],
                "name": "calls",
                "type": "tuple[]",
            }
        ],
        "name": "aggregate3",
        "outputs": [
            {
                "components": [
                    {"name": "success", "type": "bool"},
                    {"name": "returnData", "type": "bytes"},
                ],
                "name": "returnData",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "payable",
        "type": "function",
    },
]


class Web3ContractReader(ContractReaderABC):
    """ContractReaderABC over an AsyncWeb3 instance (e.g. https://mainnet.base.org)."""

    def __init__(
        self,
        rpc_url: str | None = None,
        *,
        multicall_address: str = MULTICALL3_ADDRESS,
        timeout: float = 10.0,
        block: str = "latest",
        w3: AsyncWeb3 | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            rpc_url: JSON-RPC endpoint URL. Required unless w3 is given.
            multicall_address: Multicall3 deployment used for batched reads.
            timeout: Request timeout in seconds (ignored when w3 is given).
            block: Block identifier every call is executed against.
            w3: Optional preconfigured AsyncWeb3 (tests, shared providers). The
                reader does not disconnect a provider it did not create.
        """
        if w3 is None:
            if not rpc_url:
                raise ValueError("rpc_url is required when no AsyncWeb3 instance is given")
            w3 = AsyncWeb3(
                AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": ClientTimeout(total=timeout)})
            )
            self._owns_provider = True
        else:
            self._owns_provider = False
        self._w3 = w3
        self._block = block
        self._multicall = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(multicall_address), abi=MULTICALL3_ABI
        )

    def _contract(self, address: str, function: ContractFunction):
        return self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(address), abi=[dict(function.abi_entry)]
        )

    @staticmethod
    def _normalize_args(function: ContractFunction, args: Sequence[Any]) -> list[Any]:
        if len(args) != len(function.input_types):
            raise ValueError(
                f"{function.name} expects {len(function.input_types)} argument(s), got {len(args)}"
            )
        # web3 only accepts checksummed addresses as arguments
        return [
            AsyncWeb3.to_checksum_address(arg) if abi_type == "address" else arg
            for abi_type, arg in zip(function.input_types, args)
        ]

    async def read_one(
        self,
        address: str,
        function: ContractFunction,
        args: Sequence[Any] = (),
    ) -> Any:
        contract = self._contract(address, function)
        bound = getattr(contract.functions, function.name)(*self._normalize_args(function, args))
        try:
            return await bound.call(block_identifier=self._block)
        except Web3Exception as exc:
            raise ContractReadError(f"{function.name} call to {address} failed: {exc}") from exc

    def _encode(self, call: ContractCall) -> bytes:
        contract = self._contract(call.address, call.function)
        calldata = contract.encode_abi(
            call.function.name, args=self._normalize_args(call.function, call.args)
        )
        return to_bytes(hexstr=calldata)

    @staticmethod
    def _decode(function: ContractFunction, data: bytes) -> Any:
        """Decode return data. Single-output functions return the bare value."""
        values = decode(function.output_types, data)
        if len(values) == 1:
            return values[0]
        return tuple(values)

    async def read_batch(self, calls: Sequence[ContractCall]) -> list[CallResult]:
        if not calls:
            return []
        requests = [
            (AsyncWeb3.to_checksum_address(call.address), True, self._encode(call))
            for call in calls
        ]
        logger.debug("aggregate3 batch of %d calls", len(requests))
        try:
            returned = await self._multicall.functions.aggregate3(requests).call(
                block_identifier=self._block
            )
        except Web3Exception as exc:
            raise ContractReadError(f"aggregate3 batch of {len(calls)} calls failed: {exc}") from exc
        if len(returned) != len(calls):
            raise ContractReadError(
                f"aggregate3 returned {len(returned)} results for {len(calls)} calls"
            )

        results: list[CallResult] = []
        for call, (success, data) in zip(calls, returned):
            if not success:
                results.append(CallFailure(f"{call.label} reverted"))
                continue
            try:
                results.append(CallSuccess(self._decode(call.function, bytes(data))))
            except DecodingError as exc:
                results.append(CallFailure(f"{call.label} returned undecodable data: {exc}"))
        return results

    async def close(self) -> None:
        """Close the HTTP session of a provider this reader created."""
        if self._owns_provider:
            await self._w3.provider.disconnect()
