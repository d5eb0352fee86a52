"""Aggregate analytics over an owner's holdings."""

from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import AnalyticsSummary

DEFAULT_CONCENTRATION_THRESHOLD = 20.0


def summarize_holdings(
    holdings: list[HoldingRecord],
    market_prices: dict[str, float] | None = None,
    other_investments: float = 0.0,
    concentration_threshold: float = DEFAULT_CONCENTRATION_THRESHOLD,
) -> AnalyticsSummary:
    """Total ESOP value, share counts and concentration flag.

    Each grant is valued at the market price for its ticker when one is
    supplied, otherwise at its exercise price.

    Args:
        holdings: The owner's holding records.
        market_prices: Optional {ticker: price} overrides.
        other_investments: Value of everything else in the portfolio.
        concentration_threshold: Percent of portfolio above which ESOP
            holdings count as concentrated.
    """
    prices = {ticker.upper(): price for ticker, price in (market_prices or {}).items()}
    total_value = sum(
        h.total_grants * prices.get(h.ticker, h.exercise_price) for h in holdings
    )

    portfolio = total_value + other_investments
    percent = round(total_value / portfolio * 100, 1) if portfolio > 0 else None

    return AnalyticsSummary(
        total_value=round(total_value, 2),
        total_vested_shares=sum(h.vested for h in holdings),
        total_unvested_shares=sum(h.unvested for h in holdings),
        percent_of_portfolio=percent,
        high_concentration=percent is not None and percent > concentration_threshold,
        holdings_count=len(holdings),
    )
