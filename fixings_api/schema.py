"""GraphQL schema: valuation and fixing queries."""

import datetime

import strawberry

from fixings_api.config import get_settings
from fixings_api.services import average_rates, price_zero_coupon_swap, resolve_equity_fixing
from fixings_api.types import (
    AveragingMethod,
    AveragingResult,
    EquityIndexInput,
    FixingResult,
    MarketInput,
    PeriodInput,
    ZeroCouponSwapInput,
    ZeroCouponSwapResult,
)


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return get_settings().api_version

    @strawberry.field
    def price_zero_coupon_swap(
        self,
        swap: ZeroCouponSwapInput,
        market: MarketInput,
        fair_rate_day_counter: str = "ACT/365F",
    ) -> ZeroCouponSwapResult:
        """Price a zero-coupon swap: leg NPVs, floating projection, fair fixed rate."""
        return price_zero_coupon_swap(
            swap=swap,
            market=market,
            fair_rate_day_counter=fair_rate_day_counter,
        )

    @strawberry.field
    def equity_index_fixing(
        self,
        index: EquityIndexInput,
        market: MarketInput,
        date: datetime.date,
        forecast_todays_fixing: bool = False,
    ) -> FixingResult:
        """Observed or forecast level of an equity index."""
        return resolve_equity_fixing(
            index=index,
            market=market,
            fixing_date=date,
            forecast_todays_fixing=forecast_todays_fixing,
        )

    @strawberry.field
    def average_rates(
        self,
        averaging: AveragingMethod,
        periods: list[PeriodInput],
    ) -> AveragingResult:
        """Compound or simple aggregate of per-period fixings."""
        return average_rates(averaging=averaging, periods=periods)


schema = strawberry.Schema(query=Query)
