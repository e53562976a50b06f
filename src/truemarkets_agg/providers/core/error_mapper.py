"""Domain concept for turning provider exceptions into envelope error text."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider/backend exceptions to the `error` string of a response envelope.

    One mapper per public operation; the label says which operation failed and
    the exception supplies the underlying description, e.g.
    "Error retrieving market details: ContractReadError: execution reverted".
    """

    label: str = "Error"

    def describe(self, exc: BaseException) -> str:
        """Return "<label>: <ExceptionType>: <message>" (message omitted when empty)."""
        message = str(exc)
        kind = type(exc).__name__
        if not message:
            return f"{self.label}: {kind}"
        return f"{self.label}: {kind}: {message}"
