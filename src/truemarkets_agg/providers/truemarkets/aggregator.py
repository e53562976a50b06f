"""Full market snapshot assembled from three sequential batched reads.

1. Market contract: question, additional info, source, status, end of trading,
   and the YES/NO pool addresses.
2. Pools: token0/token1 of each pool and slot0 (sqrt price).
3. Balances: reference asset and outcome token held by each pool.

Each batch needs addresses returned by the previous one, so they cannot be
issued concurrently. Failed calls in batches 1 and 2 fail the snapshot; a failed
balance read counts as zero and only lowers the TVL figure.
"""
import logging
from decimal import Decimal

from truemarkets_agg.providers.core import (CallResult, ContractCall,
                                            ContractReaderABC,
                                            is_valid_address)
from truemarkets_agg.providers.truemarkets.abi import (ADDITIONAL_INFO,
                                                       BALANCE_OF,
                                                       END_OF_TRADING,
                                                       GET_CURRENT_STATUS,
                                                       GET_POOL_ADDRESSES,
                                                       MARKET_QUESTION,
                                                       MARKET_SOURCE, SLOT0,
                                                       TOKEN0, TOKEN1)
from truemarkets_agg.providers.truemarkets.models import (MarketBasicInfo,
                                                          PoolInfo, PoolState)
from truemarkets_agg.providers.truemarkets.pricing import (
    ReferenceSlot, detect_reference_slot, outcome_price, total_value_locked)
from truemarkets_agg.providers.truemarkets.status import status_from_code
from truemarkets_agg.schemas import (MarketDetail, MarketPrices, MarketTokens,
                                     OutcomeToken)

logger = logging.getLogger(__name__)


class MarketDetailAggregator:
    """Builds a MarketDetail for one market address."""

    def __init__(
        self,
        reader: ContractReaderABC,
        *,
        reference_address: str,
        reference_decimals: int,
        outcome_decimals: int,
    ) -> None:
        self._reader = reader
        self._reference_address = reference_address
        self._reference_decimals = reference_decimals
        self._outcome_decimals = outcome_decimals

    async def detail(self, market_address: str) -> MarketDetail:
        """Read and assemble the snapshot.

        Raises:
            ValueError: If market_address is not an address, or a pool does not
                hold the reference asset.
            BatchCallError: If a structural call in batch 1 or 2 fails.
            ContractReadError: If a batch round trip fails.
        """
        if not is_valid_address(market_address):
            raise ValueError(f"Invalid market address: {market_address!r}")

        info = await self._read_basic_info(market_address)
        yes_pool, no_pool = await self._read_pools(info.yes_pool, info.no_pool)
        yes_state, no_state = await self._read_pool_states(yes_pool, no_pool)

        return MarketDetail(
            market_address=market_address,
            question=info.question,
            additional_info=info.additional_info,
            source=info.source,
            status=status_from_code(info.status_code).value,
            end_of_trading=info.end_of_trading,
            tokens=MarketTokens(
                yes=OutcomeToken(token_address=yes_pool.outcome_token, lp_address=yes_pool.lp_address),
                no=OutcomeToken(token_address=no_pool.outcome_token, lp_address=no_pool.lp_address),
            ),
            prices=MarketPrices(
                yes=float(self._price(yes_pool)),
                no=float(self._price(no_pool)),
            ),
            tvl=float(
                total_value_locked(
                    yes_state.reference_balance,
                    no_state.reference_balance,
                    self._reference_decimals,
                )
            ),
        )

    def _price(self, pool: PoolInfo) -> Decimal:
        return outcome_price(
            pool.sqrt_price_x96,
            pool.reference_slot,
            self._reference_decimals,
            self._outcome_decimals,
        )

    async def _read_basic_info(self, market_address: str) -> MarketBasicInfo:
        results = await self._reader.read_batch(
            [
                ContractCall(market_address, MARKET_QUESTION),
                ContractCall(market_address, ADDITIONAL_INFO),
                ContractCall(market_address, MARKET_SOURCE),
                ContractCall(market_address, GET_CURRENT_STATUS),
                ContractCall(market_address, END_OF_TRADING),
                ContractCall(market_address, GET_POOL_ADDRESSES),
            ]
        )
        question, additional_info, source, status, end_of_trading, pools = results
        yes_pool, no_pool = pools.unwrap("getPoolAddresses")
        return MarketBasicInfo(
            question=question.unwrap("marketQuestion"),
            additional_info=additional_info.unwrap("additionalInfo"),
            source=source.unwrap("marketSource"),
            status_code=status.unwrap("getCurrentStatus"),
            end_of_trading=int(end_of_trading.unwrap("endOfTrading")),
            yes_pool=yes_pool,
            no_pool=no_pool,
        )

    async def _read_pools(self, yes_pool: str, no_pool: str) -> tuple[PoolInfo, PoolInfo]:
        results = await self._reader.read_batch(
            [
                ContractCall(yes_pool, TOKEN0),
                ContractCall(yes_pool, TOKEN1),
                ContractCall(no_pool, TOKEN0),
                ContractCall(no_pool, TOKEN1),
                ContractCall(yes_pool, SLOT0),
                ContractCall(no_pool, SLOT0),
            ]
        )
        yes_token0, yes_token1, no_token0, no_token1, yes_slot0, no_slot0 = results
        return (
            self._pool_info(yes_pool, yes_token0, yes_token1, yes_slot0),
            self._pool_info(no_pool, no_token0, no_token1, no_slot0),
        )

    def _pool_info(
        self,
        lp_address: str,
        token0: CallResult,
        token1: CallResult,
        slot0: CallResult,
    ) -> PoolInfo:
        address0 = token0.unwrap(f"token0@{lp_address}")
        address1 = token1.unwrap(f"token1@{lp_address}")
        sqrt_price_x96 = int(slot0.unwrap(f"slot0@{lp_address}")[0])
        slot = detect_reference_slot(address0, address1, self._reference_address)
        outcome_token = address1 if slot is ReferenceSlot.TOKEN0 else address0
        return PoolInfo(
            lp_address=lp_address,
            outcome_token=outcome_token,
            reference_slot=slot,
            sqrt_price_x96=sqrt_price_x96,
        )

    async def _read_pool_states(
        self, yes_pool: PoolInfo, no_pool: PoolInfo
    ) -> tuple[PoolState, PoolState]:
        results = await self._reader.read_batch(
            [
                ContractCall(self._reference_address, BALANCE_OF, (yes_pool.lp_address,)),
                ContractCall(yes_pool.outcome_token, BALANCE_OF, (yes_pool.lp_address,)),
                ContractCall(self._reference_address, BALANCE_OF, (no_pool.lp_address,)),
                ContractCall(no_pool.outcome_token, BALANCE_OF, (no_pool.lp_address,)),
            ]
        )
        yes_reference, yes_outcome, no_reference, no_outcome = (
            self._balance(result, call_label)
            for result, call_label in zip(
                results,
                ("yes pool reference", "yes pool outcome", "no pool reference", "no pool outcome"),
            )
        )
        return (
            PoolState(yes_pool.sqrt_price_x96, yes_reference, yes_outcome),
            PoolState(no_pool.sqrt_price_x96, no_reference, no_outcome),
        )

    @staticmethod
    def _balance(result: CallResult, call_label: str) -> int:
        if not result.ok:
            logger.warning("Balance read failed (%s), counting as 0: %s", call_label, result.error)
        return int(result.value_or(0))
