"""Investment strategy synthesis.

Turns a planning region, risk tolerance and user goal profile into a
bundle of recommendations:

  1. Core diversified strategy        2. Sector allocation strategy
  3. ESOP diversification strategy    4. One of: retirement income,
                                         opportunistic growth, financial safety

plus downside-risk metrics, benchmark reference data, ESOP liquidation and
tax guidance, and the summary allocation split. Everything here is a pure
function of its inputs. The advice text is descriptive; the branch
selection and the numeric allocations are what callers rely on.
"""

from datetime import date

from esopplan.engines.benchmarks import (
    ADVISORIES,
    BENCHMARK_DATA_AS_OF,
    BENCHMARKS,
    DATA_SOURCES,
    DEFAULT_VOLATILITY,
    DRAWDOWN_MULTIPLIER,
    MARKET_DATA,
    RECOVERY_TIME,
    RISK_ADJUSTED_ALLOCATION,
    STRESS_TESTS,
    WORST_YEAR_RETURN,
)
from esopplan.models.enums import (
    PlanningRegion,
    RiskTolerance,
    resolve_region,
    resolve_risk_tolerance,
)
from esopplan.models.profile import AnalyticsSummary, UserGoalProfile
from esopplan.models.strategy import (
    ActionStep,
    AllocationTargets,
    Benchmark,
    BenchmarkSet,
    BenchmarkSnapshot,
    DownsideMetrics,
    EsopStrategy,
    ExerciseFundingPlan,
    Strategy,
    StrategyBundle,
    StressTest,
)

LOW = RiskTolerance.LOW
MEDIUM = RiskTolerance.MEDIUM
HIGH = RiskTolerance.HIGH

# ---------------------------------------------------------------------------
# Base strategy table. Region only changes the bond/equity split for LOW.
# ---------------------------------------------------------------------------

BASE_STRATEGIES: dict[RiskTolerance, dict] = {
    LOW: {
        "focus": "capital preservation and modest growth",
        "bond_allocation": {PlanningRegion.US: 60, PlanningRegion.INDIA: 50},
        "equity_allocation": {PlanningRegion.US: 30, PlanningRegion.INDIA: 40},
        "alt_allocation": 10,
        "equity_style": "large-cap value and dividend stocks",
        "bond_style": "government and high-grade corporate bonds",
        "alt_investments": ["REITs", "Gold"],
    },
    MEDIUM: {
        "focus": "balanced growth with moderate risk",
        "bond_allocation": {PlanningRegion.US: 40, PlanningRegion.INDIA: 40},
        "equity_allocation": {PlanningRegion.US: 50, PlanningRegion.INDIA: 50},
        "alt_allocation": 10,
        "equity_style": "blend of growth and value stocks across market caps",
        "bond_style": "mix of government and corporate bonds",
        "alt_investments": ["REITs", "Gold", "Commodities"],
    },
    HIGH: {
        "focus": "aggressive growth accepting higher volatility",
        "bond_allocation": {PlanningRegion.US: 20, PlanningRegion.INDIA: 20},
        "equity_allocation": {PlanningRegion.US: 70, PlanningRegion.INDIA: 70},
        "alt_allocation": 10,
        "equity_style": "growth-oriented stocks with small/mid-cap exposure",
        "bond_style": "corporate and emerging market bonds",
        "alt_investments": ["REITs", "Commodities", "Private Equity"],
    },
}

FUND_EXAMPLES: dict[PlanningRegion, dict[str, list[str]]] = {
    PlanningRegion.US: {
        "large_cap": [
            "Vanguard S&P 500 ETF (VOO)",
            "SPDR S&P 500 ETF (SPY)",
            "iShares Core S&P 500 ETF (IVV)",
        ],
        "mid_small_cap": [
            "Vanguard Mid-Cap ETF (VO)",
            "iShares Russell 2000 ETF (IWM)",
            "Vanguard Small-Cap ETF (VB)",
        ],
        "international": [
            "Vanguard Total International Stock ETF (VXUS)",
            "iShares MSCI EAFE ETF (EFA)",
        ],
        "bonds": [
            "iShares Core U.S. Aggregate Bond ETF (AGG)",
            "Vanguard Total Bond Market ETF (BND)",
        ],
        "dividend": [
            "Vanguard High Dividend Yield ETF (VYM)",
            "SPDR Portfolio S&P 500 High Dividend ETF (SPYD)",
        ],
        "growth": ["Vanguard Growth ETF (VUG)", "Invesco QQQ Trust (QQQ)"],
        "value": ["Vanguard Value ETF (VTV)", "iShares S&P 500 Value ETF (IVE)"],
        "sectors": [
            "Technology Select Sector SPDR Fund (XLK)",
            "Health Care Select Sector SPDR Fund (XLV)",
        ],
        "alternatives": ["Vanguard Real Estate ETF (VNQ)", "SPDR Gold Shares (GLD)"],
    },
    PlanningRegion.INDIA: {
        "large_cap": [
            "Nippon India ETF Nifty BeES (NIFTYBEES)",
            "SBI Nifty Index Fund",
            "HDFC Index Fund - Sensex Plan",
        ],
        "mid_small_cap": [
            "Motilal Oswal Nasdaq 100 ETF (MON100)",
            "Nippon India ETF Junior BeES (JUNIORBEES)",
        ],
        "international": [
            "Franklin India Feeder - Franklin U.S. Opportunities Fund",
            "ICICI Prudential US Bluechip Equity Fund",
        ],
        "bonds": [
            "SBI ETF - Liquid Fund",
            "HDFC Short Term Debt Fund",
            "ICICI Prudential Short Term Fund",
        ],
        "dividend": [
            "ICICI Prudential Dividend Yield Equity Fund",
            "UTI Dividend Yield Fund",
        ],
        "growth": ["HDFC Growth Opportunities Fund", "Axis Growth Opportunities Fund"],
        "value": ["ICICI Prudential Value Discovery Fund", "Kotak India EQ Contra Fund"],
        "sectors": ["ICICI Prudential Technology Fund", "Tata Digital India Fund"],
        "alternatives": [
            "SBI Gold Fund",
            "HDFC Gold Fund",
            "ICICI Prudential Regular Gold Savings Fund",
        ],
    },
}

# Allocation percentages per strategy slot: (low, medium, high)
_CORE_ALLOCATION = {LOW: 50, MEDIUM: 60, HIGH: 70}
_SECTOR_ALLOCATION = {LOW: 10, MEDIUM: 15, HIGH: 20}
_ESOP_ALLOCATION = {LOW: 15, MEDIUM: 10, HIGH: 5}
_RETIREMENT_ALLOCATION = {LOW: 25, MEDIUM: 15, HIGH: 5}
_OPPORTUNISTIC_ALLOCATION = {LOW: 10, MEDIUM: 15, HIGH: 5}
_SAFETY_ALLOCATION = {LOW: 25, MEDIUM: 15, HIGH: 5}

_SECTOR_RANGE = {LOW: "5-10%", MEDIUM: "10-15%", HIGH: "15-20%"}
_ESOP_SELL_RANGE = {LOW: "5-10%", MEDIUM: "10-15%", HIGH: "15-20%"}
_EMERGENCY_MONTHS = {LOW: 12, MEDIUM: 6, HIGH: 3}

OPPORTUNISTIC_SAVINGS_RATE = 30
RETIREMENT_MAX_BOND_ALLOCATION = 70

# ---------------------------------------------------------------------------
# ESOP liquidation and tax guidance
# ---------------------------------------------------------------------------

ANNUAL_SELL_PERCENTAGE = {LOW: 10, MEDIUM: 15, HIGH: 20}
CONCENTRATION_SELL_BONUS = 5
MAX_ANNUAL_SELL_PERCENTAGE = 25
DEFAULT_ESOP_VALUE = 100000
EXERCISE_COST_RATIO = 0.2
CASH_BUFFER_RATIO = 0.05

ESOP_TAX_RATE = {PlanningRegion.US: 22, PlanningRegion.INDIA: 10}

TAX_GUIDANCE: dict[PlanningRegion, dict[str, str]] = {
    PlanningRegion.US: {
        "income_tax": (
            "Ordinary income tax rates apply at exercise "
            "(22-37% federal plus state taxes)"
        ),
        "capital_gains": (
            "Long-term capital gains tax (15-20%) applies for shares held "
            ">1 year after exercise"
        ),
        "surcharge": "Additional 3.8% Net Investment Income Tax for higher income brackets",
        "strategy": (
            "Consider exercising options early if AMT exposure is low to start "
            "long-term capital gains clock"
        ),
    },
    PlanningRegion.INDIA: {
        "income_tax": (
            "Perquisite tax applies at exercise "
            "(taxed as salary at your income tax slab rate)"
        ),
        "capital_gains": (
            "Long-term capital gains tax (10% above ₹1 lakh) for shares held "
            ">1 year; otherwise STCG at 15%"
        ),
        "surcharge": "Health and Education Cess of 4% applies on the tax amount",
        "strategy": (
            "Consider exercising soon after grant if share price is low to "
            "minimize perquisite tax"
        ),
    },
}

_REGION_LABEL = {PlanningRegion.US: "US", PlanningRegion.INDIA: "Indian"}
_REGION_MARKET = {PlanningRegion.US: "the US", PlanningRegion.INDIA: "India"}
_CURRENCY = {PlanningRegion.US: "$", PlanningRegion.INDIA: "₹"}


def _round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def generate_strategies(
    region: str | PlanningRegion,
    risk_tolerance: str | RiskTolerance,
    goals: UserGoalProfile | None = None,
) -> list[Strategy]:
    """Build the four-strategy list for a region, risk tolerance and profile."""
    region = resolve_region(region)
    risk = resolve_risk_tolerance(risk_tolerance)
    goals = goals or UserGoalProfile()

    strategies = [
        _core_strategy(region, risk, goals),
        _sector_strategy(region, risk, goals),
        _esop_diversification_strategy(region, risk),
    ]
    if goals.has_retirement_focus:
        strategies.append(_retirement_income_strategy(region, risk, goals))
    elif goals.savings_rate > OPPORTUNISTIC_SAVINGS_RATE:
        strategies.append(_opportunistic_growth_strategy(region, risk, goals))
    else:
        strategies.append(_financial_safety_strategy(region, risk, goals))
    return strategies


def _core_strategy(
    region: PlanningRegion, risk: RiskTolerance, goals: UserGoalProfile
) -> Strategy:
    base = BASE_STRATEGIES[risk]
    funds = FUND_EXAMPLES[region]
    bonds = base["bond_allocation"][region]
    equity = base["equity_allocation"][region]

    if risk == HIGH:
        examples = [funds["growth"][0], funds["growth"][1], funds["mid_small_cap"][0]]
    elif risk == MEDIUM:
        examples = [funds["large_cap"][0], funds["bonds"][0], funds["international"][0]]
    else:
        examples = [funds["large_cap"][0], funds["bonds"][0], funds["bonds"][1]]

    if goals.has_retirement_focus:
        horizon_note = (
            "Given your proximity to retirement, gradually increase your bond "
            "allocation by 1% annually."
        )
    else:
        horizon_note = "Your longer time horizon allows for more growth-oriented investments."

    return Strategy(
        title="Core Investment Strategy",
        description=(
            f"Focus on {base['focus']} through a diversified portfolio with "
            f"{equity}% equities and {bonds}% fixed income."
        ),
        examples=examples,
        allocation=_CORE_ALLOCATION[risk],
        detailed_advice=(
            f"For a {risk.value} risk investor aged {goals.current_age} in "
            f"{region.value.upper()} with a {goals.investment_horizon}-year horizon, "
            f"prioritize {base['equity_style']}. {horizon_note} Consider a {bonds}% "
            f"allocation to {base['bond_style']} for income and stability."
        ),
    )


def _sector_strategy(
    region: PlanningRegion, risk: RiskTolerance, goals: UserGoalProfile
) -> Strategy:
    funds = FUND_EXAMPLES[region]
    if goals.has_retirement_focus:
        horizon_note = (
            "As you approach retirement, shift towards defensive sectors like "
            "healthcare and utilities."
        )
    else:
        horizon_note = "With a longer horizon, consider higher-growth sectors."
    focus_sectors = (
        "technology, healthcare, and clean energy"
        if region == PlanningRegion.US
        else "IT, financial services, and consumer goods"
    )
    market = "US" if region == PlanningRegion.US else "Indian"

    return Strategy(
        title="Sector Allocation Strategy",
        description=(
            f"Strategic exposure customized for your {goals.current_age}-year age "
            f"profile to high-potential sectors in the {market} market aligned with "
            f"{risk.value} risk tolerance."
        ),
        examples=[funds["sectors"][0], funds["sectors"][1], funds["growth"][0]],
        allocation=_SECTOR_ALLOCATION[risk],
        detailed_advice=(
            f"With {risk.value} risk tolerance at age {goals.current_age}, allocate "
            f"{_SECTOR_RANGE[risk]} to sectors with long-term growth potential. "
            f"{horizon_note} In {_REGION_MARKET[region]}, focus on {focus_sectors}."
        ),
    )


def _esop_diversification_strategy(region: PlanningRegion, risk: RiskTolerance) -> Strategy:
    funds = FUND_EXAMPLES[region]
    return Strategy(
        title="ESOP Diversification Strategy",
        description=(
            "Systematic approach to rebalance portfolio as ESOP shares vest and "
            "become available for sale."
        ),
        examples=[
            f"Sell {_ESOP_SELL_RANGE[risk]} of vested shares annually",
            "Reinvest proceeds in core strategy",
            funds["international"][0],
        ],
        allocation=_ESOP_ALLOCATION[risk],
        detailed_advice=(
            "To reduce single-stock concentration risk, implement a disciplined "
            "selling strategy for vested ESOP shares. For each sale, reinvest "
            "proceeds following your core allocation model, prioritizing asset "
            "classes that are underweight in your overall portfolio."
        ),
    )


def _retirement_income_strategy(
    region: PlanningRegion, risk: RiskTolerance, goals: UserGoalProfile
) -> Strategy:
    funds = FUND_EXAMPLES[region]
    years = goals.years_to_retirement
    bonds = BASE_STRATEGIES[risk]["bond_allocation"][region]
    target_bonds = min(bonds + 2 * (15 - years), RETIREMENT_MAX_BOND_ALLOCATION)
    market = "the US market" if region == PlanningRegion.US else "India"

    return Strategy(
        title="Retirement Income Strategy",
        description=(
            f"Designed for {years} years until retirement at age "
            f"{goals.retirement_age}, focusing on income generation and capital "
            "preservation."
        ),
        examples=[funds["dividend"][0], funds["bonds"][0], funds["alternatives"][0]],
        allocation=_RETIREMENT_ALLOCATION[risk],
        detailed_advice=(
            f"With {years} years until retirement at age {goals.retirement_age}, "
            "prioritize income-generating assets. Implement a glide path strategy, "
            f"increasing bond allocation from current {bonds}% to {target_bonds}% by "
            "retirement. Focus on dividend aristocrats, REITS, and high-quality bonds "
            f"in {market}."
        ),
    )


def _opportunistic_growth_strategy(
    region: PlanningRegion, risk: RiskTolerance, goals: UserGoalProfile
) -> Strategy:
    funds = FUND_EXAMPLES[region]
    rate = f"{goals.savings_rate:.1f}"
    markets = (
        "US and global markets"
        if region == PlanningRegion.US
        else "Indian and emerging markets"
    )
    return Strategy(
        title="Opportunistic Growth Strategy",
        description=(
            f"Leverage your strong {rate}% savings rate to capture high-growth "
            f"opportunities in {markets}."
        ),
        examples=[funds["mid_small_cap"][0], funds["growth"][1], funds["sectors"][1]],
        allocation=_OPPORTUNISTIC_ALLOCATION[risk],
        detailed_advice=(
            f"With a {rate}% savings rate and {goals.investment_horizon}-year horizon, "
            "you can afford to take calculated risks for higher returns. Consider "
            "tactical allocations to emerging sectors, small-cap growth, and "
            "international markets. Your strong cash flow provides a buffer to "
            "weather short-term volatility."
        ),
    )


def _financial_safety_strategy(
    region: PlanningRegion, risk: RiskTolerance, goals: UserGoalProfile
) -> Strategy:
    funds = FUND_EXAMPLES[region]
    if risk == LOW:
        examples = [funds["bonds"][0], funds["alternatives"][0], "High-yield savings"]
    else:
        examples = [funds["value"][0], funds["dividend"][0], funds["bonds"][0]]
    months = _EMERGENCY_MONTHS[risk]
    reserve = goals.monthly_expenses * months

    return Strategy(
        title="Financial Safety Strategy",
        description=(
            "Build resilience with emergency reserves and defensive positions for "
            "long-term stability."
        ),
        examples=examples,
        allocation=_SAFETY_ALLOCATION[risk],
        detailed_advice=(
            f"Maintain a robust emergency fund covering {months} months of expenses "
            f"({_CURRENCY[region]}{reserve:,.0f}). Complement this with defensive "
            "equity positions and high-quality bonds to provide stability during "
            "market downturns. Review and replenish this reserve quarterly."
        ),
    )


# ---------------------------------------------------------------------------
# Downside risk
# ---------------------------------------------------------------------------


def calculate_downside_metrics(
    region: str | PlanningRegion,
    risk_tolerance: str | RiskTolerance,
    benchmarks: BenchmarkSnapshot | None = None,
) -> DownsideMetrics:
    """Drawdown, worst-year and stress-test figures for a risk tolerance.

    Volatility comes from the primary benchmark when a snapshot is given,
    otherwise from the regional default.
    """
    region = resolve_region(region)
    risk = resolve_risk_tolerance(risk_tolerance)

    volatility = DEFAULT_VOLATILITY[region]
    if benchmarks is not None and benchmarks.benchmarks.primary.volatility:
        volatility = benchmarks.benchmarks.primary.volatility

    recession, crash, inflation = STRESS_TESTS[risk]
    return DownsideMetrics(
        max_drawdown=round(-volatility * DRAWDOWN_MULTIPLIER[risk], 1),
        worst_year=round(WORST_YEAR_RETURN[risk], 1),
        volatility=round(volatility, 1),
        stress_test=StressTest(
            recession=recession,
            market_crash=crash,
            inflation_spike=inflation,
        ),
        advisories=list(ADVISORIES[region][risk]),
        recovery_time=RECOVERY_TIME[risk],
    )


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


def generate_benchmarks(
    region: str | PlanningRegion, as_of: date | None = None
) -> BenchmarkSnapshot:
    """Reference benchmark indices and market rates for a region."""
    region = resolve_region(region)
    slots = {
        slot: Benchmark(**data, data_as_of=BENCHMARK_DATA_AS_OF)
        for slot, data in BENCHMARKS[region].items()
    }
    market = MARKET_DATA[region]
    return BenchmarkSnapshot(
        region=region,
        benchmarks=BenchmarkSet(**slots),
        risk_free_rate=market["risk_free_rate"],
        inflation_rate=market["inflation_rate"],
        market_description=market["description"],
        last_updated=as_of or date.today(),
        data_sources={key: list(sources) for key, sources in DATA_SOURCES.items()},
    )


# ---------------------------------------------------------------------------
# ESOP liquidation
# ---------------------------------------------------------------------------


def liquidation_percentage(risk_tolerance: str | RiskTolerance, high_concentration: bool) -> int:
    """Share of vested ESOP stock to sell each year."""
    base = ANNUAL_SELL_PERCENTAGE[resolve_risk_tolerance(risk_tolerance)]
    if high_concentration:
        return min(base + CONCENTRATION_SELL_BONUS, MAX_ANNUAL_SELL_PERCENTAGE)
    return base


def generate_esop_strategy(
    region: str | PlanningRegion,
    risk_tolerance: str | RiskTolerance,
    summary: AnalyticsSummary | None = None,
) -> EsopStrategy:
    """Liquidation schedule, exercise funding and tax guidance for ESOP holdings."""
    region = resolve_region(region)
    risk = resolve_risk_tolerance(risk_tolerance)
    summary = summary or AnalyticsSummary()

    esop_value = summary.total_value or DEFAULT_ESOP_VALUE
    concentrated = summary.high_concentration
    sell_pct = liquidation_percentage(risk, concentrated)
    tax = TAX_GUIDANCE[region]
    estimated_cost = _round_half_up(esop_value * EXERCISE_COST_RATIO)

    if concentrated:
        share = (
            f"{summary.percent_of_portfolio:g}"
            if summary.percent_of_portfolio is not None
            else "35+"
        )
        risk_assessment = (
            f"Your portfolio shows significant concentration risk with {share}% in "
            "company stock. This exceeds recommended thresholds and increases volatility."
        )
        pace_note = "Given your high concentration, consider accelerating this schedule in the first year."
    else:
        risk_assessment = (
            "Your current ESOP holdings represent a manageable portion of your overall "
            "portfolio. Continue monitoring this ratio as shares vest to prevent future "
            "concentration risk."
        )
        pace_note = "This gradual approach balances diversification needs with potential upside."

    return EsopStrategy(
        overview=(
            f"This ESOP integration strategy is tailored for {_REGION_LABEL[region]} "
            f"employees with {risk.value} risk tolerance, focusing on systematic "
            "diversification while maximizing after-tax returns."
        ),
        risk_assessment=risk_assessment,
        liquidation_plan=(
            f"Implement a disciplined approach to sell {sell_pct}% of vested shares "
            f"annually to reduce single-stock exposure. {pace_note}"
        ),
        liquidation_percentage=sell_pct,
        tax_planning=(
            f"In {region.value.upper()}, {tax['income_tax']}. After sale, "
            f"{tax['capital_gains']}. {tax['strategy']}"
        ),
        future_vesting_strategy=(
            "As new shares vest quarterly or annually, evaluate your concentration "
            "metrics before each vesting event. Maintain a \"sell-to-cover\" strategy "
            "for tax obligations and consider selling additional shares if they exceed "
            f"{15 if concentrated else 20}% of your portfolio."
        ),
        exercise_funding=ExerciseFundingPlan(
            estimated_cost=estimated_cost,
            monthly_savings_target=_round_half_up(esop_value * EXERCISE_COST_RATIO / 12),
            annual_sell_percentage=sell_pct,
            tax_rate=ESOP_TAX_RATE[region],
            funding_sources=[
                "Monthly savings allocation",
                "Sell-to-cover strategy",
                "Short-term liquid investments",
            ],
        ),
        action_steps=[
            ActionStep(
                step="Establish ESOP exercise fund",
                details=(
                    "Create a dedicated high-yield savings account specifically for "
                    "funding future option exercises"
                ),
                timeline="Immediate",
            ),
            ActionStep(
                step="Implement quarterly sell strategy",
                details=(
                    f"Sell {sell_pct}% of currently vested shares and reinvest "
                    "according to your core allocation"
                ),
                timeline="Next quarter",
            ),
            ActionStep(
                step="Tax planning consultation",
                details=(
                    "Meet with a tax professional experienced in "
                    + (
                        "US equity compensation"
                        if region == PlanningRegion.US
                        else "Indian ESOP taxation"
                    )
                    + " to optimize exercise timing"
                ),
                timeline="Within 30 days",
            ),
            ActionStep(
                step="Annual portfolio rebalancing",
                details=(
                    "Adjust overall portfolio allocation to maintain target weights "
                    "after integrating proceeds from ESOP sales"
                ),
                timeline="Annually",
            ),
        ],
        additional_recommendations=[
            "Consider a "
            + ("10b5-1 plan" if region == PlanningRegion.US else "structured selling program")
            + " to automate sales during open windows",
            f"Maintain a cash buffer of {_CURRENCY[region]}"
            f"{_round_half_up(esop_value * CASH_BUFFER_RATIO):,} for opportunistic exercises",
            "Review your strategy after significant company events or stock price "
            "movements of ±20%",
        ],
    )


# ---------------------------------------------------------------------------
# Summary allocation
# ---------------------------------------------------------------------------


def get_risk_adjusted_allocation(
    region: str | PlanningRegion, risk_tolerance: str | RiskTolerance
) -> AllocationTargets:
    """Equity/bond/alternative split shown in summaries.

    Reads RISK_ADJUSTED_ALLOCATION, not BASE_STRATEGIES; the two tables give
    different splits for the same inputs.
    """
    equity, bonds, alternatives = RISK_ADJUSTED_ALLOCATION[resolve_region(region)][
        resolve_risk_tolerance(risk_tolerance)
    ]
    return AllocationTargets(equity=equity, bonds=bonds, alternatives=alternatives)


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


def synthesize(
    region: str | PlanningRegion,
    risk_tolerance: str | RiskTolerance,
    goals: UserGoalProfile | None = None,
    summary: AnalyticsSummary | None = None,
    as_of: date | None = None,
) -> StrategyBundle:
    """Assemble strategies, downside metrics, benchmarks and ESOP guidance."""
    region = resolve_region(region)
    risk = resolve_risk_tolerance(risk_tolerance)
    benchmarks = generate_benchmarks(region, as_of=as_of)
    return StrategyBundle(
        region=region,
        risk_tolerance=risk,
        strategies=generate_strategies(region, risk, goals),
        downside=calculate_downside_metrics(region, risk, benchmarks),
        benchmarks=benchmarks,
        allocation=get_risk_adjusted_allocation(region, risk),
        esop_strategy=generate_esop_strategy(region, risk, summary),
    )
