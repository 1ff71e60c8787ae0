import math
from dataclasses import dataclass, replace

MAX_YEARS = 100
MAX_MONTHS = MAX_YEARS * 12
MAX_DEPOSIT = 1e9
MAX_CONTRIBUTION = 1e8
MIN_RATE_PCT, MAX_RATE_PCT = -50.0, 100.0
MAX_TAX_PCT = 60.0
MAX_INFLATION_PCT = 50.0
MAX_GROWTH_PCT = 100.0
MAX_COMPOUND_GROWTH_PCT = 1000.0


@dataclass
class CompoundInputs:
    initial_investment: float
    regular_addition: float = 0.0  # applied each month
    annual_interest_rate_pct: float = 0.0
    frequency: str = "monthly"
    horizon_unit: str = "years"  # "years" or "months"
    horizon_value: int = 10
    contribution_delay_months: int = 0
    contribution_timing: str = "start"  # "start" or "end"
    contribution_growth_annual_pct: float = 0.0
    contribution_growth_frequency: str = "annual"  # "annual" or "monthly"

    def total_months(self) -> int:
        count = _whole_count(self.horizon_value)
        return count if self.horizon_unit.lower() == "months" else count * 12

    def delay_months(self) -> int:
        return _whole_count(self.contribution_delay_months)

    def sanitized(self) -> "CompoundInputs":
        """Copy with every number made finite and pulled into its supported range."""
        max_horizon = MAX_MONTHS if self.horizon_unit.lower() == "months" else MAX_YEARS
        return replace(
            self,
            initial_investment=_bounded(self.initial_investment, 0.0, MAX_DEPOSIT),
            regular_addition=_bounded(self.regular_addition, 0.0, MAX_CONTRIBUTION),
            annual_interest_rate_pct=_bounded(self.annual_interest_rate_pct, MIN_RATE_PCT, MAX_RATE_PCT),
            horizon_value=_bounded(self.horizon_value, 0, max_horizon),
            contribution_delay_months=_bounded(self.contribution_delay_months, 0, MAX_MONTHS),
            contribution_growth_annual_pct=_bounded(self.contribution_growth_annual_pct, 0.0, MAX_COMPOUND_GROWTH_PCT),
        )


@dataclass
class SavingsInputs:
    initial_deposit: float
    annual_contribution: float = 0.0
    annual_contribution_growth_pct: float = 0.0
    monthly_contribution: float = 0.0
    monthly_contribution_growth_pct: float = 0.0
    annual_interest_rate_pct: float = 0.0
    frequency: str = "monthly"
    years: int = 10
    tax_rate_pct: float = 0.0
    inflation_rate_pct: float = 0.0
    contributions_at_period_end: bool = False

    def whole_years(self) -> int:
        return _whole_count(self.years)

    def sanitized(self):
        """Copy with every number made finite and pulled into its supported range."""
        return replace(
            self,
            initial_deposit=_bounded(self.initial_deposit, 0.0, MAX_DEPOSIT),
            annual_contribution=_bounded(self.annual_contribution, -MAX_CONTRIBUTION, MAX_CONTRIBUTION),
            annual_contribution_growth_pct=_bounded(self.annual_contribution_growth_pct, -MAX_GROWTH_PCT, MAX_GROWTH_PCT),
            monthly_contribution=_bounded(self.monthly_contribution, -MAX_CONTRIBUTION, MAX_CONTRIBUTION),
            monthly_contribution_growth_pct=_bounded(self.monthly_contribution_growth_pct, -MAX_GROWTH_PCT, MAX_GROWTH_PCT),
            annual_interest_rate_pct=_bounded(self.annual_interest_rate_pct, MIN_RATE_PCT, MAX_RATE_PCT),
            years=_bounded(self.years, 0, MAX_YEARS),
            tax_rate_pct=_bounded(self.tax_rate_pct, 0.0, MAX_TAX_PCT),
            inflation_rate_pct=_bounded(self.inflation_rate_pct, 0.0, MAX_INFLATION_PCT),
        )


@dataclass
class BalanceOverTimeInputs(SavingsInputs):
    chart_period: str = "yearly"  # "monthly", "quarterly" or "yearly"


def _bounded(value: float, low: float, high: float) -> float:
    """Clamp to [low, high]; anything non-finite counts as zero first."""
    if not math.isfinite(value):
        value = 0
    return max(low, min(high, value))


def _whole_count(value: float) -> int:
    """Floor to a non-negative integer; anything non-finite counts as zero."""
    if not math.isfinite(value) or value <= 0:
        return 0
    return math.floor(value)
