"""
Zero-coupon interest rate swap.

Both legs pay a single cash flow at the (delayed) maturity date:

- fixed:    N_fix = N * ((1 + K) ** alpha(T0, TK) - 1), or a quoted amount
- floating: N_flt = N * average(averaging, [(alpha_k, L_k)]) over index sub-periods

"Payer" and "receiver" refer to the fixed leg. Legs are built once in the
constructor; a change of terms means building a new swap.

Valuation follows Constructed -> ArgumentsBound -> Priced. Binding arguments
again discards earlier results, so a failed re-pricing leaves nothing to read.
Results remember the revision of every curve handle and fixing series the
pricer read; once any of them changes, the results are stale and the swap
drops back to ArgumentsBound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from fixings.averaging import RateAveraging
from fixings.cashflows import SimpleCashFlow, SubPeriodsCashFlow
from fixings.contract import SwapArguments, SwapResults
from fixings.dates import BusinessDayConvention, Calendar, DayCounter, TimeUnit
from fixings.errors import ArgumentTypeMismatch, ResultsNotReady
from fixings.indexes import InterestRateIndex


class SwapType(int, Enum):
    RECEIVER = -1
    PAYER = 1


class InstrumentState(str, Enum):
    CONSTRUCTED = "constructed"
    ARGUMENTS_BOUND = "arguments_bound"
    PRICED = "priced"


@dataclass
class _Valuation:
    """Mutable pricing state held by an otherwise immutable swap."""

    state: InstrumentState = InstrumentState.CONSTRUCTED
    results: Optional[SwapResults] = None


@dataclass(frozen=True, eq=False)
class ZeroCouponSwap:
    """
    Zero-coupon swap on an interest-rate index.

    Give either `fixed_payment`, or `fixed_rate` with `fixed_day_counter`.
    `discount_curve` names the market curve used by the pricer. Terms cannot
    be reassigned once the legs are built.
    """

    type: SwapType
    base_nominal: float
    start_date: date
    maturity_date: date
    index: InterestRateIndex
    payment_calendar: Calendar
    discount_curve: str
    fixed_payment: Optional[float] = None
    fixed_rate: Optional[float] = None
    fixed_day_counter: Optional[DayCounter] = None
    convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING
    payment_delay: int = 0
    averaging: RateAveraging = RateAveraging.COMPOUND

    _fixed_leg: tuple[SimpleCashFlow] = field(init=False, repr=False)
    _floating_leg: tuple[SubPeriodsCashFlow] = field(init=False, repr=False)
    _valuation: _Valuation = field(init=False, repr=False, default_factory=_Valuation)

    def __post_init__(self) -> None:
        self._validate()
        if self.fixed_rate is not None:
            alpha = self.fixed_day_counter.year_fraction(self.start_date, self.maturity_date)
            object.__setattr__(
                self, "fixed_payment", self.base_nominal * ((1.0 + self.fixed_rate) ** alpha - 1.0)
            )
        pay_date = self.payment_date
        object.__setattr__(self, "_fixed_leg", (SimpleCashFlow(pay_date, self.fixed_payment),))
        object.__setattr__(
            self,
            "_floating_leg",
            (
                SubPeriodsCashFlow(
                    payment_date=pay_date,
                    nominal=self.base_nominal,
                    index=self.index,
                    accrual_start=self.start_date,
                    accrual_end=self.maturity_date,
                    averaging=self.averaging,
                ),
            ),
        )

    def _validate(self) -> None:
        if self.base_nominal <= 0:
            raise ValueError("base_nominal must be > 0")
        if self.maturity_date <= self.start_date:
            raise ValueError("maturity_date must be after start_date")
        if self.payment_delay < 0:
            raise ValueError("payment_delay must be >= 0")
        if (self.fixed_payment is None) == (self.fixed_rate is None):
            raise ValueError("exactly one of fixed_payment or fixed_rate must be given")
        if self.fixed_rate is not None and self.fixed_day_counter is None:
            raise ValueError("fixed_rate requires fixed_day_counter")

    @classmethod
    def from_fixed_payment(
        cls,
        type: SwapType,
        base_nominal: float,
        start_date: date,
        maturity_date: date,
        fixed_payment: float,
        index: InterestRateIndex,
        payment_calendar: Calendar,
        discount_curve: str,
        **kwargs,
    ) -> ZeroCouponSwap:
        """Swap quoted by its fixed cash amount."""
        return cls(
            type=type,
            base_nominal=base_nominal,
            start_date=start_date,
            maturity_date=maturity_date,
            index=index,
            payment_calendar=payment_calendar,
            discount_curve=discount_curve,
            fixed_payment=fixed_payment,
            **kwargs,
        )

    @classmethod
    def from_fixed_rate(
        cls,
        type: SwapType,
        base_nominal: float,
        start_date: date,
        maturity_date: date,
        fixed_rate: float,
        fixed_day_counter: DayCounter,
        index: InterestRateIndex,
        payment_calendar: Calendar,
        discount_curve: str,
        **kwargs,
    ) -> ZeroCouponSwap:
        """Swap quoted by a fixed rate compounded over the whole life."""
        return cls(
            type=type,
            base_nominal=base_nominal,
            start_date=start_date,
            maturity_date=maturity_date,
            index=index,
            payment_calendar=payment_calendar,
            discount_curve=discount_curve,
            fixed_rate=fixed_rate,
            fixed_day_counter=fixed_day_counter,
            **kwargs,
        )

    # --- Inspectors ---

    @property
    def payment_date(self) -> date:
        return self.payment_calendar.advance(
            self.maturity_date, self.payment_delay, TimeUnit.DAYS, self.convention
        )

    @property
    def fixed_leg(self) -> tuple[SimpleCashFlow]:
        """Just one cash flow."""
        return self._fixed_leg

    @property
    def floating_leg(self) -> tuple[SubPeriodsCashFlow]:
        """Just one cash flow."""
        return self._floating_leg

    @property
    def leg_signs(self) -> tuple[float, float]:
        """(fixed, floating) signs: -1 for the leg being paid."""
        return (-float(self.type.value), float(self.type.value))

    # --- Pricing contract ---

    @property
    def state(self) -> InstrumentState:
        valuation = self._valuation
        if valuation.state is InstrumentState.PRICED and valuation.results.is_stale():
            valuation.state = InstrumentState.ARGUMENTS_BOUND
            valuation.results = None
        return valuation.state

    def setup_arguments(self, arguments: SwapArguments) -> None:
        """Fill `arguments` from the legs; any earlier results are discarded."""
        if not isinstance(arguments, SwapArguments):
            raise ArgumentTypeMismatch(
                f"wrong argument type: expected SwapArguments, got {type(arguments).__name__}"
            )
        arguments.legs = [self._fixed_leg, self._floating_leg]
        arguments.payer = list(self.leg_signs)
        arguments.base_nominal = self.base_nominal
        arguments.fixed_payment = self.fixed_payment
        arguments.discount_curve = self.discount_curve
        self._valuation.state = InstrumentState.ARGUMENTS_BOUND
        self._valuation.results = None

    def fetch_results(self, results: SwapResults) -> None:
        if not isinstance(results, SwapResults):
            raise ArgumentTypeMismatch(
                f"wrong results type: expected SwapResults, got {type(results).__name__}"
            )
        if not results.ready:
            raise ResultsNotReady("pricer has not populated fixed/floating leg NPVs")
        self._valuation.results = SwapResults(
            fixed_leg_npv=results.fixed_leg_npv,
            floating_leg_npv=results.floating_leg_npv,
            floating_payment=results.floating_payment,
            valuation_date=results.valuation_date,
            curve_revisions=list(results.curve_revisions),
            fixing_revisions=list(results.fixing_revisions),
        )
        self._valuation.state = InstrumentState.PRICED

    # --- Results ---

    def _priced_results(self) -> SwapResults:
        state = self.state
        if state is not InstrumentState.PRICED:
            raise ResultsNotReady(f"swap is not priced (state: {state.value})")
        return self._valuation.results

    @property
    def fixed_leg_npv(self) -> float:
        return self._priced_results().fixed_leg_npv

    @property
    def floating_leg_npv(self) -> float:
        return self._priced_results().floating_leg_npv

    @property
    def npv(self) -> float:
        return self._priced_results().npv

    @property
    def floating_payment(self) -> float:
        """Projected floating cash amount (unsigned, undiscounted)."""
        return self._priced_results().floating_payment

    def fair_fixed_payment(self) -> float:
        """Fixed amount that sets the swap NPV to zero."""
        results = self._priced_results()
        if results.fixed_leg_npv == 0.0:
            raise ValueError("fixed leg has zero NPV; fair fixed payment is undefined")
        return -results.floating_leg_npv / results.fixed_leg_npv * self.fixed_payment

    def fair_fixed_rate(self, day_counter: DayCounter) -> float:
        """Fixed rate that sets the swap NPV to zero."""
        alpha = day_counter.year_fraction(self.start_date, self.maturity_date)
        growth = self.fair_fixed_payment() / self.base_nominal + 1.0
        if growth < 0.0:
            raise ValueError(
                f"fair fixed payment implies a growth factor of {growth}; no real fixed rate exists"
            )
        return growth ** (1.0 / alpha) - 1.0
