"""Rich renderables for ranking and detail view models."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from distrovitals.presentation.badges import BadgeSet, BadgeSource
from distrovitals.presentation.classifiers import ScoreBar, ScoreTier
from distrovitals.presentation.detail import DetailView, Methodology
from distrovitals.presentation.history import Sparkline
from distrovitals.presentation.rankings import RankingView

TIER_COLORS = {
    ScoreTier.HIGH: "green",
    ScoreTier.MEDIUM: "yellow",
    ScoreTier.LOW: "red",
}

TREND_COLORS = {
    "trend-up": "green",
    "trend-down": "red",
    "trend-stable": "dim",
}

RANK_COLORS = {
    "rank-1": "bold gold1",
    "rank-2": "bold grey70",
    "rank-3": "bold dark_orange3",
}

SOURCE_STYLES = {
    BadgeSource.GITHUB: ("", "white"),
    BadgeSource.REDDIT: ("r ", "orange_red1"),
}

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"


def score_bar(bar: ScoreBar, width: int = 20) -> str:
    """Create a visual score bar."""
    filled = max(0, min(width, int(bar.width_percent / 100 * width)))
    empty = width - filled
    color = TIER_COLORS[bar.tier]
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * empty}[/dim]"


def score_text(bar: ScoreBar) -> str:
    color = TIER_COLORS[bar.tier]
    return f"[{color}]{bar.text}[/{color}]"


def badges_text(badges: BadgeSet, links: bool = True) -> Text:
    """Badges as one line of text; each badge links to its source."""
    if not badges:
        return Text(badges.placeholder or "", style="dim italic")
    text = Text()
    for i, badge in enumerate(badges.badges):
        if i:
            text.append("  ")
        prefix, color = SOURCE_STYLES[badge.source]
        style = f"{color} link {badge.url}" if links else color
        text.append(f"{prefix}{badge.label}", style=style)
    return text


def sparkline_text(sparkline: Sparkline) -> str:
    """Map projected y coordinates onto block glyphs, one per history point."""
    top = len(SPARK_BLOCKS) - 1
    glyphs = []
    for _, y in sparkline.coordinates:
        height = max(0.0, min(100.0, 100 - y))
        glyphs.append(SPARK_BLOCKS[round(height / 100 * top)])
    return "".join(glyphs)


def ranking_table(view: RankingView, links: bool = True) -> Table:
    """The rows of one ranking page as a rich table."""
    table = Table(title=f"Distribution Health Rankings (page {view.current_page})")
    rank, name, score, contributors, releases, stars, trend = view.header
    table.add_column(rank, style="dim", width=6)
    table.add_column(name, style="cyan")
    table.add_column(score, justify="right")
    table.add_column("", width=20)
    table.add_column(contributors, justify="right", style="green")
    table.add_column(releases, justify="right")
    table.add_column(stars, justify="right", style="yellow")
    table.add_column(trend, justify="center")
    table.add_column("Sources")

    for row in view.rows:
        rank_style = RANK_COLORS.get(row.rank_class, "")
        rank_text = f"[{rank_style}]#{row.rank}[/{rank_style}]" if rank_style else f"#{row.rank}"
        trend_color = TREND_COLORS[row.trend.style]
        table.add_row(
            rank_text,
            Text(row.name),
            score_text(row.score),
            score_bar(row.score),
            row.contributors,
            row.releases_30d,
            row.stars,
            f"[{trend_color}]{row.trend.glyph}[/{trend_color}]",
            badges_text(row.badges, links=links),
        )
    return table


def ranking_renderable(view: RankingView) -> RenderableType:
    """Full list view: error block, empty state, or table plus pagination line."""
    if view.error is not None:
        return Panel(
            f"[bold red]{view.error.message}[/bold red]\n[dim]{escape(view.error.detail)}[/dim]",
            title="Error",
            border_style="red",
            expand=False,
        )
    if view.empty_message is not None:
        first, *rest = view.empty_message
        return Panel("\n".join([first, *(f"[dim]{line}[/dim]" for line in rest)]), expand=False)

    pagination = view.pagination.controls if view.pagination else None
    if pagination is None:
        footer = f"[dim]{view.pagination.text if view.pagination else ''}[/dim]"
    else:
        prev = "← Prev" if pagination.has_previous else "[dim]← Prev[/dim]"
        nxt = "Next →" if pagination.has_next else "[dim]Next →[/dim]"
        footer = f"{prev}   {pagination.label}   {nxt}"
    return Group(ranking_table(view), Text.from_markup(footer, justify="center"))


def methodology_renderable(panel: Methodology) -> RenderableType:
    marker = "▶" if panel.collapsed else "▼"
    if panel.collapsed:
        return Text.from_markup(f"[bold]{marker} {panel.title}[/bold] [dim](m to expand)[/dim]")
    lines = [f"[bold]{marker} {panel.title}[/bold]", "", f"[bold]{panel.formula}[/bold]"]
    for section in panel.sections:
        lines += ["", f"[bold cyan]{section.title}[/bold cyan]", escape(section.text)]
    lines += ["", f"[italic dim]{panel.note}[/italic dim]"]
    return Text.from_markup("\n".join(lines))


def detail_renderable(view: DetailView, methodology: Methodology | None = None) -> RenderableType:
    """Full detail page; `methodology` overrides the view's panel state."""
    header = view.header
    overall_color = TIER_COLORS[header.overall.tier]
    trend_color = TREND_COLORS[header.trend.style]
    parts: list[RenderableType] = [
        Text.from_markup(
            f"[bold cyan]{escape(header.name)}[/bold cyan]  [{trend_color}]{escape(header.trend_text)}[/{trend_color}]"
            f"    [bold {overall_color}]{header.overall.text}[/bold {overall_color}] / 100"
        ),
    ]
    if view.description:
        parts.append(Text(view.description, style="dim"))
    parts.append(badges_text(view.badges))
    for badge in view.badges.badges:
        parts.append(Text(badge.tooltip, style="dim"))

    metrics = Table(show_header=False, box=None, padding=(0, 2))
    for _ in range(5):
        metrics.add_column(justify="right")
    cards = [f"[bold]{card.value}[/bold] [dim]{card.label}[/dim]" for card in view.metrics]
    for i in range(0, len(cards), 5):
        metrics.add_row(*cards[i:i + 5])
    parts.append(Panel(metrics, title="Metrics", expand=False))

    if view.latest_release is not None:
        age = f"  [dim]{view.latest_release.age}[/dim]" if view.latest_release.age else ""
        parts.append(Text.from_markup(f"[bold]Latest release:[/bold] {escape(view.latest_release.tag)}{age}"))

    breakdown = Table(title="Score Breakdown", show_header=True)
    breakdown.add_column("Component", style="bold")
    breakdown.add_column("Score", justify="right")
    breakdown.add_column("Bar", width=20)
    for bar in view.breakdown:
        breakdown.add_row(bar.label, score_text(bar), score_bar(bar))
    parts.append(breakdown)

    if view.sparkline is not None:
        scores = view.sparkline.scores
        parts.append(
            Panel(
                f"[cyan]{sparkline_text(view.sparkline)}[/cyan]\n"
                f"[dim]{min(scores):.1f} - {max(scores):.1f}[/dim]",
                title=view.sparkline.title,
                expand=False,
            )
        )
    elif view.history_message:
        parts.append(Text(view.history_message, style="dim"))

    parts.append(methodology_renderable(methodology or view.methodology))
    return Group(*parts)
