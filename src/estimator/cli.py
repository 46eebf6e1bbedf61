"""CLI for the home energy audit."""
import json
import logging
import sys
from pathlib import Path
from typing import Optional
import click
import yaml

from parsers import parse_bill_text, parse_bulb_text, parse_equipment_label
from schemas.home import Home
from .config import AuditConfig, load_config
from .grading import grade as grade_equipment, weighted_efficiency_ratio
from .report import build_home_report, render_text_report, save_text_report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_home(path: Path) -> Home:
    """Load a Home from a YAML or JSON file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Home.model_validate(data)


def echo_json(data: dict):
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Home energy audit: parse scans, grade equipment, build reports."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.argument("home_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with rates and thresholds"
)
@click.option("--rate", type=float, default=None, help="Electricity rate override ($/kWh)")
@click.option("--gas-rate", type=float, default=None, help="Gas rate override ($/therm)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the report to a file instead of stdout"
)
def report(
    home_file: Path,
    config_path: Optional[Path],
    rate: Optional[float],
    gas_rate: Optional[float],
    as_json: bool,
    output: Optional[Path],
):
    """
    Build the energy report for a home.

    HOME_FILE is a YAML or JSON description of the home.
    """
    try:
        config = load_config(config_path)
        overrides = {}
        if rate is not None:
            overrides["electricity_rate"] = rate
        if gas_rate is not None:
            overrides["gas_rate"] = gas_rate
        if overrides:
            config = AuditConfig.model_validate({**config.model_dump(), **overrides})

        home = load_home(home_file)
        home_report = build_home_report(home, config)

        if as_json:
            text = json.dumps(home_report.model_dump(mode="json"), indent=2)
            if output:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(text)
            else:
                click.echo(text)
        elif output:
            save_text_report(home_report, output)
        else:
            click.echo(render_text_report(home_report))

        if output:
            click.echo(f"Report saved to: {output}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logger.exception("report error details:")
        sys.exit(1)


@cli.command()
@click.argument("home_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def grade(home_file: Path):
    """Print the efficiency grade and weighted ratio for a home."""
    try:
        home = load_home(home_file)
        ratio = weighted_efficiency_ratio(home.equipment)
        result = grade_equipment(home.equipment)
        click.echo(f"Grade: {result.value} (ratio {ratio:.3f})")
        click.echo(result.summary)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logger.exception("grade error details:")
        sys.exit(1)


@cli.command("parse-bill")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_bill(text_file: Path):
    """Extract usage, cost, rate and billing period from bill OCR text."""
    parsed = parse_bill_text(text_file.read_text(encoding="utf-8"))
    echo_json(parsed.model_dump(mode="json", exclude={"raw_text"}))


@cli.command("parse-label")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_label(text_file: Path):
    """Extract manufacturer, model, efficiency and capacity from rating plate text."""
    parsed = parse_equipment_label(text_file.read_text(encoding="utf-8"))
    echo_json(parsed.model_dump(mode="json", exclude={"raw_text"}))


@cli.command("parse-bulb")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_bulb(text_file: Path):
    """Extract wattage, lumens, color temperature and type from bulb label text."""
    parsed = parse_bulb_text(text_file.read_text(encoding="utf-8"))
    echo_json(parsed.model_dump(mode="json", exclude={"raw_text"}))


if __name__ == "__main__":
    cli()
