"""Report generators for ESOP Planner."""

from esopplan.reports.strategy_report import StrategyReportGenerator

__all__ = ["StrategyReportGenerator"]
