"""Abstract base class for on-chain contract readers."""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from truemarkets_agg.providers.core.calls import (CallResult, ContractCall,
                                                  ContractFunction)


class ContractReaderABC(ABC):
    """Read-only access to contract state.

    Implementations own the transport and its timeout/retry policy. Market
    providers only describe the calls they need and interpret the results.
    """

    @abstractmethod
    async def read_one(
        self,
        address: str,
        function: ContractFunction,
        args: Sequence[Any] = (),
    ) -> Any:
        """Execute a single contract read.

        Args:
            address: Target contract address.
            function: ABI fragment of the function to call.
            args: Positional arguments matching function.inputs.

        Returns:
            The decoded return value (a tuple for multi-output functions).

        Raises:
            ContractReadError: If the call reverts, the node reports an error,
                or the return data cannot be decoded.
        """

    @abstractmethod
    async def read_batch(self, calls: Sequence[ContractCall]) -> list[CallResult]:
        """Execute several reads in one round trip.

        Individual call failures are reported as CallFailure entries; only a
        failure of the round trip itself raises.

        Args:
            calls: Calls to execute.

        Returns:
            One CallResult per call, same length and order as calls.
        """

    async def close(self) -> None:
        """Release transport resources. Override if the reader holds any."""

    async def __aenter__(self) -> "ContractReaderABC":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
