"""Interactive TUI dashboard for browsing distribution health rankings."""

from __future__ import annotations

import logging
import webbrowser

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import DataTable, Footer, Header, Static

from distrovitals.api.client import DistroVitalsClient
from distrovitals.presentation.detail import DetailView, Methodology
from distrovitals.presentation.rankings import RankingRow, RankingView, activate
from distrovitals.session import DashboardSession

from .render import (
    RANK_COLORS,
    TREND_COLORS,
    badges_text,
    detail_renderable,
    ranking_renderable,
    score_bar,
    score_text,
)

logger = logging.getLogger(__name__)

SOURCES_COLUMN = "sources"


class RankingsTable(DataTable):
    """One page of ranking rows, keyed by slug."""

    def show_page(self, view: RankingView) -> None:
        """Replace the table contents with the rows of `view`."""
        self.clear(columns=True)
        rank, name, score, contributors, releases, stars, trend = view.header
        self.add_column(rank, key="rank")
        self.add_column(name, key="name")
        self.add_column(score, key="score")
        self.add_column("", key="bar")
        self.add_column(contributors, key="contributors")
        self.add_column(releases, key="releases")
        self.add_column(stars, key="stars")
        self.add_column(trend, key="trend")
        self.add_column("Sources", key=SOURCES_COLUMN)

        for row in view.rows:
            rank_style = RANK_COLORS.get(row.rank_class, "")
            trend_color = TREND_COLORS[row.trend.style]
            self.add_row(
                Text(f"#{row.rank}", style=rank_style),
                Text(row.name, style="cyan"),
                Text.from_markup(score_text(row.score)),
                Text.from_markup(score_bar(row.score, width=12)),
                Text(row.contributors, justify="right"),
                Text(row.releases_30d, justify="right"),
                Text(row.stars, justify="right"),
                Text(row.trend.glyph, style=trend_color, justify="center"),
                badges_text(row.badges, links=False),
                key=row.slug,
            )
        self.move_cursor(row=0, column=0)
        self.scroll_home(animate=False)


class DistroDashboard(App):
    """TUI dashboard for DistroVitals rankings."""

    TITLE = "DistroVitals"

    CSS = """
    Screen {
        layout: vertical;
    }

    #list-view {
        height: 1fr;
    }

    #rankings-table {
        height: 1fr;
        border: solid green;
    }

    #list-message {
        padding: 1 2;
    }

    #pagination {
        height: 1;
        content-align: center middle;
    }

    #detail-view {
        height: 1fr;
        border: solid cyan;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("n", "next_page", "Next page"),
        ("p", "prev_page", "Prev page"),
        ("escape", "back", "Back"),
        ("b", "back", "Back"),
        ("m", "toggle_methodology", "Methodology"),
    ]

    def __init__(self, session: DashboardSession) -> None:
        super().__init__()
        self.session = session
        self.view: RankingView | None = None
        self.detail: DetailView | None = None
        self.methodology: Methodology | None = None

    def compose(self) -> ComposeResult:
        """Create dashboard layout."""
        yield Header()

        with Container(id="list-view"):
            yield Static("Loading rankings...", id="list-message")
            yield RankingsTable(id="rankings-table", cursor_type="cell", zebra_stripes=True)
            yield Static(id="pagination")

        with VerticalScroll(id="detail-view"):
            yield Static(id="detail-body")

        yield Footer()

    def on_mount(self) -> None:
        """Hide the detail pane and fetch the rankings."""
        self.query_one("#detail-view").display = False
        self.query_one("#rankings-table").display = False
        self.run_worker(self._load_rankings(), exclusive=True, group="rankings")

    async def _load_rankings(self) -> None:
        await self.session.load()
        self.refresh_list()

    def refresh_list(self) -> None:
        """Rebuild the list view from the session state."""
        self.view = self.session.ranking_view()
        table = self.query_one("#rankings-table", RankingsTable)
        message = self.query_one("#list-message", Static)
        pagination = self.query_one("#pagination", Static)

        if self.view.error is not None or self.view.is_empty:
            message.update(ranking_renderable(self.view))
            message.display = True
            table.display = False
            pagination.update("")
            return

        message.display = False
        table.display = True
        table.show_page(self.view)
        pagination.update(self.view.pagination.text if self.view.pagination else "")
        table.focus()

    def _row(self, slug: str) -> RankingRow | None:
        if self.view is None:
            return None
        return next((row for row in self.view.rows if row.slug == slug), None)

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        """Open the detail view, or the badge link when the sources cell is picked."""
        event.stop()
        slug = event.cell_key.row_key.value
        row = self._row(slug) if slug else None
        if row is None:
            return

        if event.cell_key.column_key.value == SOURCES_COLUMN:
            if row.badges:
                action = activate(row, row.badges.badges[0])
                logger.debug("Opening %s", action.url)
                webbrowser.open(action.url)
            return

        self.select_distro(activate(row).slug)

    def select_distro(self, slug: str) -> None:
        entry = self.session.select(slug)
        if entry is None:
            return
        self.detail = None
        self.methodology = None
        self.query_one("#detail-body", Static).update(f"Loading {entry.name}...")
        self.query_one("#list-view").display = False
        self.query_one("#detail-view").display = True
        self.run_worker(self._load_detail(slug), exclusive=True, group="detail")

    async def _load_detail(self, slug: str) -> None:
        detail = await self.session.load_detail(slug)
        if detail is None:
            return
        self.detail = detail
        self.methodology = detail.methodology
        self._render_detail()

    def _render_detail(self) -> None:
        if self.detail is None:
            return
        self.query_one("#detail-body", Static).update(
            detail_renderable(self.detail, self.methodology)
        )

    def action_back(self) -> None:
        if not self.session.state.in_detail:
            return
        self.session.back()
        self.detail = None
        self.query_one("#detail-view").display = False
        self.query_one("#list-view").display = True
        self.query_one("#rankings-table", RankingsTable).focus()

    def action_next_page(self) -> None:
        self._go_to_page(self.session.state.current_page + 1)

    def action_prev_page(self) -> None:
        self._go_to_page(self.session.state.current_page - 1)

    def _go_to_page(self, page: int) -> None:
        if self.session.state.in_detail:
            return
        if self.session.go_to_page(page):
            self.refresh_list()

    def action_toggle_methodology(self) -> None:
        if self.methodology is None:
            return
        self.methodology = self.methodology.toggled()
        self._render_detail()


def run_dashboard(api_url: str, timeout: float = 30.0) -> None:
    """Run the dashboard app against the backend at `api_url`."""
    session = DashboardSession(DistroVitalsClient(api_url, timeout=timeout))
    app = DistroDashboard(session)
    app.run()
