"""
Wrapped CLI Commands

Commands for summarizing a Google Takeout watch-history export locally.

Commands:
- analyze: Print (or export as JSON) the yearly summary
- peek: Show how the export's entries were parsed
- years: List the years present in the export
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config.settings import settings
from ..exceptions import TubeWrappedError
from ..models.analytics import AnalyticsReport
from ..parsers.watch_history_parser import WatchHistoryParser
from ..services.wrapped_service import WrappedService
from .constants import (
    DATE_FORMAT,
    DATETIME_FORMAT,
    DAY_NAMES,
    EXIT_SYSTEM_ERROR,
    EXIT_USER_ERROR,
    MAX_CHANNEL_WIDTH,
    MAX_TABLE_ROWS,
    MAX_TITLE_WIDTH,
    MONTH_NAMES,
)

console = Console()


def _load_service(export_path: Path) -> WrappedService:
    """Read and parse the export, mapping failures to CLI exit codes."""
    try:
        with console.status("📁 Parsing watch history..."):
            service = WrappedService()
            service.load(WatchHistoryParser.read_file(export_path))
        return service
    except TubeWrappedError as e:
        console.print(f"❌ {e.message}")
        console.print("\n💡 Make sure:")
        console.print("  • You've extracted the Takeout archive")
        console.print(
            "  • The path points to watch-history.html or watch-history.json"
        )
        raise typer.Exit(EXIT_USER_ERROR)
    except Exception as e:
        console.print(f"❌ Unexpected error: {e}")
        raise typer.Exit(EXIT_SYSTEM_ERROR)


def _format_hour(hour: int) -> str:
    return f"{hour:02d}:00"


def _display_volume(report: AnalyticsReport, year: int) -> None:
    volume = report.volume
    console.print(
        Panel(
            f"[bold]{volume.total_videos:,}[/bold] videos from "
            f"[bold]{volume.unique_channels:,}[/bold] channels\n"
            f"≈ [bold]{volume.total_hours_estimated:,}[/bold] hours watched "
            f"(estimated)\n"
            f"[bold]{volume.average_videos_per_day}[/bold] videos per day\n"
            f"[dim]{volume.date_range.start.strftime(DATE_FORMAT)} → "
            f"{volume.date_range.end.strftime(DATE_FORMAT)}[/dim]",
            title=f"🎬 Your {year} on YouTube",
            border_style="red",
        )
    )


def _display_channels(report: AnalyticsReport, top: int) -> None:
    table = Table(title="🏆 Top Channels")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Channel", style="cyan", max_width=MAX_CHANNEL_WIDTH)
    table.add_column("Videos", justify="right", style="green")
    table.add_column("Share", justify="right")
    table.add_column("First Watched", style="dim")

    for rank, stat in enumerate(report.channels[:top], start=1):
        table.add_row(
            str(rank),
            escape(stat.channel_name),
            str(stat.video_count),
            f"{stat.percentage}%",
            stat.first_watched.strftime(DATE_FORMAT),
        )
    console.print(table)


def _display_patterns(report: AnalyticsReport) -> None:
    patterns = report.patterns
    console.print(
        Panel(
            f"Peak hour: [bold]{_format_hour(patterns.peak_hour)}[/bold] UTC\n"
            f"Peak day: [bold]{DAY_NAMES[patterns.peak_day]}[/bold]\n"
            f"Peak month: [bold]{MONTH_NAMES[patterns.peak_month]}[/bold]\n"
            f"Weekdays: {patterns.weekday_count:,} · "
            f"Weekends: {patterns.weekend_count:,}",
            title="🕒 When You Watch",
            border_style="blue",
        )
    )


def _display_categories(report: AnalyticsReport) -> None:
    total = report.volume.total_videos
    table = Table(title="🎨 Content Mix")
    table.add_column("Category", style="cyan")
    table.add_column("Videos", justify="right", style="green")
    table.add_column("Share", justify="right")

    ranked = sorted(
        report.categories.as_dict().items(), key=lambda kv: kv[1], reverse=True
    )
    for category, count in ranked:
        if count == 0:
            continue
        table.add_row(
            category.value.title(), str(count), f"{count / total * 100:.1f}%"
        )
    console.print(table)


def _display_binges(report: AnalyticsReport) -> None:
    if not report.binges:
        console.print("📭 No binge sessions this year")
        return

    table = Table(title=f"🍿 Binge Sessions ({len(report.binges)})")
    table.add_column("Started", style="dim")
    table.add_column("Videos", justify="right", style="green")
    table.add_column("Minutes", justify="right")
    table.add_column("Mostly", style="cyan", max_width=MAX_CHANNEL_WIDTH)

    for session in report.binges[:MAX_TABLE_ROWS]:
        table.add_row(
            session.start_time.strftime(DATETIME_FORMAT),
            str(session.video_count),
            str(session.duration_minutes),
            escape(session.dominant_channel),
        )
    if len(report.binges) > MAX_TABLE_ROWS:
        table.caption = f"... and {len(report.binges) - MAX_TABLE_ROWS} more"
    console.print(table)


def _display_rewatches(report: AnalyticsReport) -> None:
    rewatches = report.rewatches
    lines = [
        f"Rewatches: [bold]{rewatches.total_rewatches:,}[/bold] "
        f"({rewatches.rewatch_rate}% of everything you watched)"
    ]
    if rewatches.most_rewatched_video is not None:
        top = rewatches.most_rewatched_video
        lines.append(
            f"On repeat: [bold]{escape(top.title[:MAX_TITLE_WIDTH])}[/bold] "
            f"by {escape(top.channel)} ({top.count}×)"
        )
    if rewatches.comfort_channels:
        comfort = ", ".join(rewatches.comfort_channels)
        lines.append(f"Comfort channels: {escape(comfort)}")

    console.print(
        Panel("\n".join(lines), title="🔁 Rewatches", border_style="magenta")
    )


def _display_fun_facts(report: AnalyticsReport) -> None:
    facts = report.fun_facts
    lines = [
        f"🌙 Late-night videos: {facts.late_night_count:,}",
        f"🌅 Early-bird videos: {facts.early_bird_count:,}",
        f"💼 Watched during work hours: {facts.procrastination_score:,}",
        f"🔥 Longest streak: {facts.longest_streak} days",
        f"🕳️  Rabbit holes: {facts.rabbit_hole_count}",
        f"💬 Favourite title word: \"{facts.most_common_word}\"",
        f"▶️  First video: {escape(facts.first_video.title[:MAX_TITLE_WIDTH])}",
        f"⏹️  Last video: {escape(facts.last_video.title[:MAX_TITLE_WIDTH])}",
    ]
    if facts.video_1000 is not None:
        lines.append(
            f"🎯 Video #{settings.milestone_video_number:,}: "
            f"{escape(facts.video_1000.title[:MAX_TITLE_WIDTH])}"
        )
    console.print(
        Panel("\n".join(lines), title="✨ Fun Facts", border_style="yellow")
    )


def display_report(report: AnalyticsReport, year: int, top: int) -> None:
    """Render the full report as rich panels and tables."""
    _display_volume(report, year)
    _display_channels(report, top)
    _display_patterns(report)
    _display_categories(report)
    _display_binges(report)
    _display_rewatches(report)
    _display_fun_facts(report)


def analyze_export(
    export_path: Path = typer.Argument(
        ..., help="Path to watch-history.html or watch-history.json"
    ),
    year: Optional[int] = typer.Option(
        None, "--year", "-y", help="Year to summarize (default: most recent)"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the report as JSON instead of tables"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the JSON report to this file"
    ),
    top: int = typer.Option(
        settings.default_top_channels,
        "--top",
        "-t",
        min=1,
        help="Channels to list",
    ),
) -> None:
    """
    🎬 Summarize a year of your YouTube watch history.

    Examples:
        tubewrapped analyze watch-history.html
        tubewrapped analyze watch-history.html --year 2024 --top 5
        tubewrapped analyze watch-history.json --json -o wrapped.json
    """
    service = _load_service(export_path)

    years = service.available_years()
    selected_year = year if year is not None else (years[-1] if years else None)
    report = (
        service.report_for_year(selected_year) if selected_year is not None else None
    )

    if report is None:
        if selected_year is None:
            console.print("📭 No watched videos found in this export")
        else:
            console.print(f"📭 No watched videos found for {selected_year}")
            if years:
                console.print(f"💡 Years available: {', '.join(map(str, years))}")
        raise typer.Exit(EXIT_USER_ERROR)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"✅ Report saved to {output}")
    elif as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        display_report(report, selected_year, top)


def peek_export(
    export_path: Path = typer.Argument(
        ..., help="Path to watch-history.html or watch-history.json"
    ),
) -> None:
    """
    👀 Show how the entries of an export were parsed.
    """
    service = _load_service(export_path)
    summary = service.summary()

    table = Table(title=f"📁 {export_path.name} ({summary.format_name})")
    table.add_column("Entries", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Inspected", f"{summary.entries:,}")
    table.add_row("Watch events", f"{summary.events:,}")
    table.add_row("Viewed (posts, stories)", f"{summary.viewed:,}")
    table.add_row("No activity verb", f"{summary.skipped_no_action:,}")
    table.add_row("No video link", f"{summary.skipped_no_video:,}")
    table.add_row("No timestamp", f"{summary.skipped_no_timestamp:,}")
    table.add_row("Errors", f"{summary.errors:,}")
    console.print(table)

    years = service.available_years()
    if years:
        console.print(f"📅 Years: {', '.join(map(str, years))}")


def list_years(
    export_path: Path = typer.Argument(
        ..., help="Path to watch-history.html or watch-history.json"
    ),
) -> None:
    """
    📅 List the years in an export with their video counts.
    """
    service = _load_service(export_path)
    counts = Counter(event.year for event in service.events)

    if not counts:
        console.print("📭 No watched videos found in this export")
        raise typer.Exit(EXIT_USER_ERROR)

    table = Table(title="📅 Years")
    table.add_column("Year", style="cyan")
    table.add_column("Videos", justify="right", style="green")
    for year in sorted(counts):
        table.add_row(str(year), f"{counts[year]:,}")
    console.print(table)
