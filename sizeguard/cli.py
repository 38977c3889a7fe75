"""sizeguard command line.

Usage::

    sizeguard compare previous.json current.json --fail-on-change
    sizeguard hook packages/core dist/raw-analysis.json
    sizeguard summary dist/bundle-analysis.json --top 20
    sizeguard sample-config > sizeguard.json
"""

from __future__ import annotations

import sys

import click
from result import Err
from rich.console import Console

from sizeguard.config.loader import load_config, sample_config_json
from sizeguard.config.schema import ReportConfig
from sizeguard.hook import SizeChangeHook
from sizeguard.models.analysis import SizeAnalysis
from sizeguard.services.formatting import print_plain
from sizeguard.services.report import emit_report
from sizeguard.services.snapshot import read_snapshot
from sizeguard.services.summary import render_summary


def _consoles() -> tuple[Console, Console]:
    # Resolve streams at call time so CliRunner's captured streams are used.
    return Console(file=sys.stdout), Console(file=sys.stderr)


def _load_config(path: str | None) -> ReportConfig:
    result = load_config(path)
    if isinstance(result, Err):
        raise click.ClickException(result.unwrap_err())
    return result.unwrap()


def _load_current(path: str) -> SizeAnalysis:
    result = read_snapshot(path)
    if isinstance(result, Err):
        raise click.ClickException(f"Cannot read current analysis: {result.unwrap_err().message}")
    return result.unwrap()


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a sizeguard JSON config (default: ./sizeguard.json).",
)


@click.group()
@click.version_option(package_name="sizeguard")
def cli() -> None:
    """sizeguard: bundle size change reports for CI."""


@cli.command("compare")
@click.argument("previous", type=click.Path(dir_okay=False))
@click.argument("current", type=click.Path(dir_okay=False))
@config_option
@click.option("--absolute-threshold", type=int, default=None, help="Bytes of change that count as significant.")
@click.option("--percent-threshold", type=float, default=None, help="Percent change that counts as significant.")
@click.option("--fail-on-change", is_flag=True, help="Exit with status 1 when any annotation is emitted.")
def compare_cmd(
    previous: str,
    current: str,
    config_path: str | None,
    absolute_threshold: int | None,
    percent_threshold: float | None,
    fail_on_change: bool,
) -> None:
    """Compare two snapshots and print CI annotations."""
    config = _load_config(config_path).with_thresholds(absolute_threshold, percent_threshold)
    current_analysis = _load_current(current)
    out, err = _consoles()

    prev_result = read_snapshot(previous)
    if isinstance(prev_result, Err):
        print_plain(err, f"No previous bundle analysis found: {prev_result.unwrap_err().message}")
        return

    emitted = emit_report(out, prev_result.unwrap(), current_analysis, config)
    if fail_on_change and emitted:
        sys.exit(1)


@cli.command("hook")
@click.argument("package_dir", type=click.Path(file_okay=False))
@click.argument("analysis", type=click.Path(dir_okay=False))
@config_option
@click.option("--ci/--no-ci", default=None, help="Override CI detection from the CI environment variable.")
def hook_cmd(package_dir: str, analysis: str, config_path: str | None, ci: bool | None) -> None:
    """Run the analyzer hook for PACKAGE_DIR on an analyzer result."""
    config = _load_config(config_path)
    current_analysis = _load_current(analysis)
    out, err = _consoles()

    with SizeChangeHook(package_dir, config=config, ci=ci, console=out, diagnostics=err) as hook:
        hook.on_analysis(current_analysis)
        if hook.options.summary_only:
            render_summary(out, current_analysis)


@cli.command("summary")
@click.argument("analysis", type=click.Path(dir_okay=False))
@click.option("--top", "top_n", type=click.IntRange(min=1), default=15, show_default=True)
def summary_cmd(analysis: str, top_n: int) -> None:
    """Print a size summary of one analysis."""
    out, _ = _consoles()
    render_summary(out, _load_current(analysis), top_n)


@cli.command("sample-config")
def sample_config_cmd() -> None:
    """Print the default configuration as JSON."""
    click.echo(sample_config_json())


if __name__ == "__main__":
    cli()
