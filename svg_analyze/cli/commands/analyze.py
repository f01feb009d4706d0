"""Analyze command - report centering and padding of SVG files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from svg_analyze.api import AnalysisResult, SVGAnalyzer, any_issues
from svg_analyze.config import Config
from svg_analyze.exceptions import SVGAnalyzeError, ViewBoxError
from svg_analyze.svg.parser import read_svg_text, replace_viewbox
from svg_analyze.viewbox import parse_viewbox

logger = logging.getLogger(__name__)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def print_result(result: AnalysisResult, show_fix: bool) -> None:
    """Print one result in the human-readable report format."""
    if result.has_issues:
        console.print(f"[red]✗[/red] {escape(result.name)}")
    else:
        console.print(f"[green]✓[/green] {escape(result.name)}")

    vb = result.viewbox
    if vb is not None:
        box = result.content_box
        console.print(f"  ViewBox: {vb}", markup=False)
        console.print(
            f"  Content: {box.min_x:.1f},{box.min_y:.1f} to {box.max_x:.1f},{box.max_y:.1f} "
            f"({box.width:.1f}x{box.height:.1f})",
            markup=False,
        )
        console.print(
            f"  Padding: L:{result.padding_left:.1f}% R:{result.padding_right:.1f}% "
            f"T:{result.padding_top:.1f}% B:{result.padding_bottom:.1f}%",
            markup=False,
        )
        console.print(
            f"  Center offset: X:{result.center_offset_x:.1f} Y:{result.center_offset_y:.1f}",
            markup=False,
        )
    console.print(f"  Assessment: {result.assessment}", markup=False)
    if show_fix and result.has_issues and result.suggested_viewbox:
        console.print(f"  [cyan]Suggested viewBox:[/cyan] {escape(result.suggested_viewbox)}")
    console.print()


def write_suggestions(results: list[AnalysisResult]) -> int:
    """Rewrite files with issues to use their suggested viewBox.

    Suggestions without a positive size (flat content) are skipped.
    """
    updated = 0
    for result in results:
        if not result.has_issues or result.error is not None or not result.suggested_viewbox:
            continue
        try:
            usable = parse_viewbox(result.suggested_viewbox).is_usable()
        except ViewBoxError:
            usable = False
        if not usable:
            logger.warning(
                "Not writing %s: suggested viewBox %r has no area",
                result.file_path,
                result.suggested_viewbox,
            )
            continue
        path = Path(result.file_path)
        markup = read_svg_text(path)
        path.write_text(replace_viewbox(markup, result.suggested_viewbox), encoding="utf-8")
        updated += 1
    return updated


@click.command()
@click.argument("path", required=False, default=".", type=click.Path(path_type=Path))
@click.option("--fix", "show_fix", is_flag=True, help="Show suggested viewBox fixes")
@click.option("--write", "write_fix", is_flag=True, help="Apply suggested viewBox to files with issues")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("-j", "--jobs", type=int, default=None, help="Parallel jobs for directories")
@click.pass_context
def analyze(
    ctx: click.Context,
    path: Path,
    show_fix: bool,
    write_fix: bool,
    as_json: bool,
    jobs: int | None,
) -> None:
    """Analyze SVG files for centering and padding.

    PATH: An SVG file or a directory of SVG files (default: current directory).

    Exits with status 1 if any file has issues.
    """
    obj = ctx.obj or {}
    config = obj.get("config") or Config.load()
    if jobs is not None:
        if jobs < 1:
            raise click.BadParameter("must be at least 1", param_hint="--jobs")
        config = config.with_overrides(jobs=jobs)

    if not path.exists():
        err_console.print(f"[red]Error:[/red] {escape(str(path))}: no such file or directory")
        raise SystemExit(1)

    analyzer = SVGAnalyzer(config=config)
    try:
        results = analyzer.analyze_path(path)
    except SVGAnalyzeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from None

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            print_result(result, show_fix or write_fix)

    if write_fix:
        try:
            updated = write_suggestions(results)
        except (SVGAnalyzeError, OSError) as e:
            err_console.print(f"[red]Error writing fix:[/red] {escape(str(e))}")
            raise SystemExit(1) from None
        err_console.print(f"[bold]Updated:[/bold] {updated} file(s)")

    if any_issues(results):
        raise SystemExit(1)
