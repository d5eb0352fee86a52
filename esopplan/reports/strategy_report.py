"""Plain-text strategy report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from esopplan.models.profile import AnalyticsSummary
from esopplan.models.strategy import StrategyBundle, SuccessProbabilities

TEMPLATE_DIR = Path(__file__).parent / "templates"


class StrategyReportGenerator:
    """Renders a strategy bundle and simulation results for the terminal."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        bundle: StrategyBundle,
        probabilities: SuccessProbabilities | None = None,
        summary: AnalyticsSummary | None = None,
    ) -> str:
        """Render the strategy report."""
        template = self.env.get_template("strategy_report.txt")
        return template.render(
            bundle=bundle,
            probabilities=probabilities,
            summary=summary,
        )
