"""Market reference data.

Benchmark indices, risk-free rates and inflation by planning region, plus
the per-risk parameter tables used by the simulation and strategy engines.
Keep reference numbers here; computation functions read them, never
restate them.

Benchmark sources: S&P Dow Jones Indices, Nasdaq, FTSE Russell, NSE India,
BSE India. Trailing 10-year annualized returns (2014-2024), as of Nov 2024.
"""

from datetime import date

from esopplan.models.enums import PlanningRegion, RiskTolerance

BENCHMARK_DATA_AS_OF = date(2024, 11, 15)

# ---------------------------------------------------------------------------
# Benchmark indices: {region: {slot: {...}}}
# Sharpe = (CAGR - risk-free) / volatility using the rate at compilation time.
# ---------------------------------------------------------------------------
BENCHMARKS: dict[PlanningRegion, dict[str, dict]] = {
    PlanningRegion.US: {
        "primary": {
            "name": "S&P 500",
            "cagr": 10.5,
            "volatility": 17.4,
            "sharpe": 0.58,
            "returns": {"one_year": 18.2, "three_year": 10.3, "five_year": 12.1, "ten_year": 10.5},
            "description": (
                "Index of 500 largest US publicly traded companies, widely considered "
                "the best gauge of large-cap US equities. Source: S&P Dow Jones Indices"
            ),
        },
        "secondary": {
            "name": "Nasdaq Composite",
            "cagr": 13.5,
            "volatility": 22.8,
            "sharpe": 0.48,
            "returns": {"one_year": 24.1, "three_year": 14.2, "five_year": 15.3, "ten_year": 13.5},
            "description": (
                "Tech-heavy index representing over 3,000 stocks listed on the Nasdaq "
                "exchange. Source: Nasdaq Global Indexes"
            ),
        },
        "alternative": {
            "name": "Russell 2000",
            "cagr": 7.8,
            "volatility": 24.2,
            "sharpe": 0.14,
            "returns": {"one_year": 12.4, "three_year": 6.2, "five_year": 8.1, "ten_year": 7.8},
            "description": (
                "Small-cap index representing 2000 of the smallest publicly traded US "
                "companies. Source: FTSE Russell"
            ),
        },
    },
    PlanningRegion.INDIA: {
        "primary": {
            "name": "Nifty 50",
            "cagr": 11.2,
            "volatility": 19.6,
            "sharpe": 0.38,
            "returns": {"one_year": 15.3, "three_year": 11.8, "five_year": 11.5, "ten_year": 11.2},
            "description": (
                "Flagship index on the National Stock Exchange of India, representing "
                "50 largest Indian companies. Source: NSE India"
            ),
        },
        "secondary": {
            "name": "BSE Sensex",
            "cagr": 10.9,
            "volatility": 19.2,
            "sharpe": 0.36,
            "returns": {"one_year": 14.8, "three_year": 11.2, "five_year": 11.1, "ten_year": 10.9},
            "description": (
                "Index of 30 well-established and financially sound companies listed "
                "on the Bombay Stock Exchange. Source: BSE India"
            ),
        },
        "alternative": {
            "name": "Nifty Next 50",
            "cagr": 12.8,
            "volatility": 23.5,
            "sharpe": 0.26,
            "returns": {"one_year": 18.7, "three_year": 13.5, "five_year": 13.2, "ten_year": 12.8},
            "description": (
                "Index representing the next 50 largest companies after the Nifty 50, "
                "often with higher growth potential. Source: NSE India"
            ),
        },
    },
}

# 10-year government bond yield and CPI YoY (Oct/Nov 2024)
MARKET_DATA: dict[PlanningRegion, dict] = {
    PlanningRegion.US: {
        "risk_free_rate": 4.63,
        "inflation_rate": 3.2,
        "description": (
            "US markets characterized by high liquidity, strong regulatory frameworks, "
            "and global influence. Data as of Nov 2024."
        ),
    },
    PlanningRegion.INDIA: {
        "risk_free_rate": 6.87,
        "inflation_rate": 5.49,
        "description": (
            "Indian markets characterized by high growth potential, emerging economy "
            "dynamics, and increasing global integration. Data as of Nov 2024."
        ),
    },
}

DATA_SOURCES: dict[str, list[str]] = {
    "us": [
        "S&P Dow Jones Indices",
        "Nasdaq Global Indexes",
        "FTSE Russell",
        "US Treasury",
        "Bureau of Labor Statistics",
    ],
    "india": [
        "NSE India",
        "BSE India",
        "Reserve Bank of India",
        "Ministry of Statistics and Programme Implementation",
    ],
}

# Used when no benchmark snapshot is supplied to the downside calculation
DEFAULT_VOLATILITY: dict[PlanningRegion, float] = {
    PlanningRegion.US: 14.2,
    PlanningRegion.INDIA: 16.5,
}

# ---------------------------------------------------------------------------
# Simulation parameters: annualized (mean return, standard deviation)
# ---------------------------------------------------------------------------
RETURN_PROFILES: dict[RiskTolerance, tuple[float, float]] = {
    RiskTolerance.LOW: (0.06, 0.08),
    RiskTolerance.MEDIUM: (0.09, 0.15),
    RiskTolerance.HIGH: (0.12, 0.22),
}

# ---------------------------------------------------------------------------
# Downside-risk tables
# ---------------------------------------------------------------------------
DRAWDOWN_MULTIPLIER: dict[RiskTolerance, float] = {
    RiskTolerance.LOW: 1.0,
    RiskTolerance.MEDIUM: 1.4,
    RiskTolerance.HIGH: 2.0,
}

WORST_YEAR_RETURN: dict[RiskTolerance, float] = {
    RiskTolerance.LOW: -15.0,
    RiskTolerance.MEDIUM: -25.0,
    RiskTolerance.HIGH: -35.0,
}

# (recession, market crash, inflation spike) portfolio impact in percent
STRESS_TESTS: dict[RiskTolerance, tuple[int, int, int]] = {
    RiskTolerance.LOW: (-20, -25, -5),
    RiskTolerance.MEDIUM: (-30, -35, -10),
    RiskTolerance.HIGH: (-40, -50, -15),
}

RECOVERY_TIME: dict[RiskTolerance, str] = {
    RiskTolerance.LOW: "6-18 months",
    RiskTolerance.MEDIUM: "12-24 months",
    RiskTolerance.HIGH: "18-36 months",
}

ADVISORIES: dict[PlanningRegion, dict[RiskTolerance, list[str]]] = {
    PlanningRegion.US: {
        RiskTolerance.HIGH: [
            "Consider using trailing stop-loss orders at 15-20% below current price",
            "Implement option collar strategies to limit downside while capping upside",
            "Maintain 10-15% cash position for opportunistic buying during corrections",
            "Review portfolio monthly and rebalance when allocation drifts >5%",
        ],
        RiskTolerance.MEDIUM: [
            "Use dollar-cost averaging to reduce timing risk",
            "Maintain 20-25% in bonds and fixed income for stability",
            "Consider adding defensive sector ETFs (utilities, consumer staples)",
            "Rebalance quarterly to maintain target allocation",
        ],
        RiskTolerance.LOW: [
            "Focus on capital preservation with 50%+ in bonds",
            "Use Treasury Inflation-Protected Securities (TIPS) for inflation hedge",
            "Maintain 6-12 month emergency fund in high-yield savings",
            "Review allocation annually and adjust as needed",
        ],
    },
    PlanningRegion.INDIA: {
        RiskTolerance.HIGH: [
            "Use systematic withdrawal plans (SWP) to lock in gains periodically",
            "Maintain adequate emergency buffer given higher market volatility",
            "Consider adding gold (5-10%) as portfolio insurance",
            "Review concentration risk in single stocks/sectors monthly",
        ],
        RiskTolerance.MEDIUM: [
            "Balance equity exposure with debt mutual funds",
            "Use arbitrage funds for tax-efficient short-term parking",
            "Maintain 3-6 month expenses in liquid funds",
            "Rebalance when equity allocation exceeds target by >10%",
        ],
        RiskTolerance.LOW: [
            "Stay within your emergency-fund buffer of 6-12 months",
            "Add government bonds and high-rated corporate bonds",
            "Consider Public Provident Fund (PPF) for tax-free returns",
            "Avoid concentration in any single investment beyond 20%",
        ],
    },
}

# ---------------------------------------------------------------------------
# Summary allocation lookup: {region: {risk: (equity, bonds, alternatives)}}
# Independent of the strategy base table (engines.strategy.BASE_STRATEGIES);
# the two are not reconciled.
# ---------------------------------------------------------------------------
RISK_ADJUSTED_ALLOCATION: dict[PlanningRegion, dict[RiskTolerance, tuple[int, int, int]]] = {
    PlanningRegion.US: {
        RiskTolerance.LOW: (40, 50, 10),
        RiskTolerance.MEDIUM: (60, 30, 10),
        RiskTolerance.HIGH: (80, 10, 10),
    },
    PlanningRegion.INDIA: {
        RiskTolerance.LOW: (45, 45, 10),
        RiskTolerance.MEDIUM: (55, 35, 10),
        RiskTolerance.HIGH: (75, 15, 10),
    },
}
