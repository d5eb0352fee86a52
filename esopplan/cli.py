"""Typer CLI interface for ESOP Planner."""

import json
import logging
from pathlib import Path

import numpy as np
import typer

from esopplan.models.enums import PlanningRegion, RiskTolerance

DEFAULT_DB = Path.home() / ".esopplan" / "esopplan.db"

app = typer.Typer(
    name="esopplan",
    help="ESOP Planner: equity-grant ingestion and planning analytics.",
    no_args_is_help=True,
)


def _db_option():
    return typer.Option(
        DEFAULT_DB,
        "--db",
        envvar="ESOPPLAN_DB",
        help="Path to the SQLite database file",
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ESOP Planner: equity-grant ingestion and planning analytics."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _open_repo(db: Path):
    from esopplan.db.repository import HoldingRepository
    from esopplan.db.schema import create_schema

    db.parent.mkdir(parents=True, exist_ok=True)
    conn = create_schema(db)
    return conn, HoldingRepository(conn)


@app.command(name="import")
def import_cmd(
    file: Path = typer.Argument(..., help="CSV file of equity grants"),
    owner: str = typer.Option(..., "--owner", "-o", help="Owner identifier"),
    db: Path = _db_option(),
) -> None:
    """Replace an owner's holdings with the grants in a CSV file.

    This is destructive: every holding previously stored for the owner is
    deleted before the new rows are inserted.

    \b
    Exit codes:
      0  imported
      1  the file could not be parsed (stored holdings untouched)
      2  the database failed (stored holdings may be lost)
    """
    from esopplan.exceptions import ParseError, StorageError
    from esopplan.ingestion.csv_pipeline import IngestionPipeline

    conn, repo = _open_repo(db)
    try:
        result = IngestionPipeline(repo).ingest(file, owner)
    except ParseError as exc:
        typer.echo(f"Error [parsing]: {exc}", err=True)
        raise typer.Exit(1)
    except StorageError as exc:
        typer.echo(f"Error [storage/{exc.phase.value}]: {exc}", err=True)
        if exc.data_loss:
            typer.echo(
                f"Warning: {exc.deleted_count} previous holding(s) for {owner} were "
                "deleted and the new batch was not saved. Re-run the import.",
                err=True,
            )
        raise typer.Exit(2)
    finally:
        conn.close()

    typer.echo(
        f"Imported {len(result.records)} holding(s) for {owner} "
        f"(replaced {result.deleted_count}) into {db.name}"
    )


@app.command()
def holdings(
    owner: str = typer.Option(..., "--owner", "-o", help="Owner identifier"),
    db: Path = _db_option(),
) -> None:
    """Print an owner's stored holdings as JSON."""
    from esopplan.service import transform_holdings_payload

    conn, repo = _open_repo(db)
    try:
        records = repo.get_holdings(owner)
    finally:
        conn.close()

    payload = transform_holdings_payload(
        {"status": "success", "data": [r.model_dump(mode="json") for r in records]}
    )
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def analyze(
    owner: str = typer.Option(..., "--owner", "-o", help="Owner identifier"),
    region: PlanningRegion = typer.Option(PlanningRegion.US, "--region", "-r"),
    risk: RiskTolerance = typer.Option(RiskTolerance.MEDIUM, "--risk"),
    age: int = typer.Option(35, "--age", help="Current age"),
    retirement_age: int = typer.Option(60, "--retirement-age"),
    horizon: int = typer.Option(10, "--horizon", help="Investment horizon in years"),
    income: float = typer.Option(100000, "--income", help="Monthly income"),
    expenses: float = typer.Option(50000, "--expenses", help="Monthly expenses"),
    other_investments: float = typer.Option(
        0.0, "--other-investments", help="Value of non-ESOP investments"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible simulations"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload"),
    db: Path = _db_option(),
) -> None:
    """Strategy recommendations and goal probabilities for an owner's holdings."""
    from esopplan.engines.analytics import summarize_holdings
    from esopplan.engines.montecarlo import MonteCarloProjector
    from esopplan.engines.strategy import synthesize
    from esopplan.models.profile import UserGoalProfile
    from esopplan.reports.strategy_report import StrategyReportGenerator
    from esopplan.service import build_analytics_response

    conn, repo = _open_repo(db)
    try:
        records = repo.get_holdings(owner)
    finally:
        conn.close()

    if not records:
        typer.echo(f"Warning: no holdings stored for {owner}", err=True)

    goals = UserGoalProfile(
        current_age=age,
        retirement_age=retirement_age,
        investment_horizon=horizon,
        monthly_income=income,
        monthly_expenses=expenses,
        planning_region=region,
    )
    summary = summarize_holdings(records, other_investments=other_investments)
    projector = MonteCarloProjector(rng=np.random.default_rng(seed))

    if as_json:
        payload = build_analytics_response(
            region, risk, goals, records, summary=summary, projector=projector
        )
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    bundle = synthesize(region, risk, goals, summary)
    probabilities = projector.project_all(records, goals)
    typer.echo(StrategyReportGenerator().render(bundle, probabilities, summary))


@app.command()
def simulate(
    risk: str = typer.Option("medium", "--risk", help="low, medium or high"),
    horizon: int = typer.Option(10, "--horizon", help="Years to compound"),
    initial: float = typer.Option(..., "--initial", help="Starting value"),
    goal: float = typer.Option(..., "--goal", help="Target value"),
    scenarios: int = typer.Option(1000, "--scenarios", min=1),
    seed: int | None = typer.Option(None, "--seed"),
) -> None:
    """Probability of growing INITIAL to GOAL over HORIZON years."""
    from esopplan.engines.montecarlo import MonteCarloProjector

    projector = MonteCarloProjector(scenarios=scenarios, rng=np.random.default_rng(seed))
    probability = projector.project(risk, horizon, initial, goal)
    typer.echo(f"Success probability: {probability:.2f}%")


if __name__ == "__main__":
    app()
