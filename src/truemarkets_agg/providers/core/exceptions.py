"""Exceptions raised by contract readers and the market providers built on them."""


class ContractReadError(Exception):
    """A contract read could not be completed (JSON-RPC error, revert or undecodable data)."""


class BatchCallError(ContractReadError):
    """A call inside a batched read failed for a field the response cannot do without."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"{field_name} call failed: {reason}")
        self.field_name = field_name
        self.reason = reason
