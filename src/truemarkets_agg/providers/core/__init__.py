"""Core provider abstractions."""
from truemarkets_agg.providers.core.calls import (CallFailure, CallResult,
                                                  CallSuccess, ContractCall,
                                                  ContractFunction)
from truemarkets_agg.providers.core.contract_reader_abc import \
    ContractReaderABC
from truemarkets_agg.providers.core.error_mapper import ProviderErrorMapper
from truemarkets_agg.providers.core.exceptions import (BatchCallError,
                                                       ContractReadError)
from truemarkets_agg.providers.core.utils import (is_valid_address,
                                                  same_address, to_units)

__all__ = [
    "BatchCallError",
    "CallFailure",
    "CallResult",
    "CallSuccess",
    "ContractCall",
    "ContractFunction",
    "ContractReadError",
    "ContractReaderABC",
    "ProviderErrorMapper",
    "is_valid_address",
    "same_address",
    "to_units",
]
