"""Display management using Textual for the battery dashboard."""

from datetime import datetime
from pathlib import Path

from textual.app import App
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Sparkline, Static

from .. import __version__
from ..config.config import Config
from ..core.scheduler import RefreshScheduler
from ..core.shared_data import RefreshPhase, StateView
from .formatting import build_details, build_hero, error_line, history_summary


HELP_TEXT = "1=details 2=history r=refresh h=help q=quit"

HELP_KEYS = (
    ("1", "detail view"),
    ("2", "history view"),
    ("r", "refresh now"),
    ("h", "this help"),
    ("q / x", "quit"),
)


class HelpScreen(ModalScreen):
    """Key reference shown over the dashboard; any key closes it."""

    def compose(self):
        keys = "\n".join(f"{key:>5}  {action}" for key, action in HELP_KEYS)
        with Vertical(id="help_box"):
            yield Static("battmon keys", id="help_title")
            yield Static(keys, id="help_keys", markup=False)

    def on_key(self, event):
        # Swallow the key so it does not reach the dashboard bindings
        event.stop()
        self.dismiss()


class DisplayManager(App):
    """Manages the Textual battery dashboard with live updates."""

    CSS_PATH = Path(__file__).parent / "battmon.tcss"

    def __init__(self, config: Config):
        """Initialize the display manager."""
        super().__init__()
        self.config = config
        self.display_mode = config.display.default_mode
        self.scheduler = None
        self._is_refreshing = False

    def compose(self):
        """Create the layout structure."""
        with Vertical(id="frame"):
            yield Static("Loading battery data...", id="header", markup=False)
            with Vertical(id="mode1_container", classes="body"):
                yield Static("", id="hero")
                yield Static("", id="details")
            with Vertical(id="mode2_container", classes="body hidden"):
                yield Sparkline([], id="history")
                yield Static("", id="history_summary", markup=False)
            yield Static("", id="error", markup=False)
            yield Static(HELP_TEXT, id="help", markup=False)

    def run_display(self, scheduler: RefreshScheduler):
        """Run the dashboard until the user quits."""
        self.scheduler = scheduler
        self.run()

    def on_mount(self):
        """Start the repaint timer when app mounts."""
        self._apply_mode()
        self._update_display()
        self.set_interval(self.config.refresh_rate, self._update_display)

    def on_key(self, event):
        """Handle key press events."""
        if event.key == "x" or event.key == "q":
            self.exit()
        elif event.key == "r":
            self._trigger_manual_refresh()
        elif event.key in ("1", "2"):
            self.display_mode = event.key
            self._apply_mode()
        elif event.key == "h":
            self.push_screen(HelpScreen())

    def _trigger_manual_refresh(self):
        """Ask the scheduler for an immediate refresh."""
        if self.scheduler:
            self._is_refreshing = True
            self.scheduler.trigger_refresh()
            self._update_display()
            # Clear refreshing indicator after a short delay
            self.set_timer(0.5, self._clear_refreshing)

    def _clear_refreshing(self):
        """Clear the refreshing indicator."""
        self._is_refreshing = False
        self._update_display()

    def _apply_mode(self):
        """Show the container for the current display mode."""
        detail_view = self.display_mode == "1"
        self.query_one("#mode1_container").set_class(not detail_view, "hidden")
        self.query_one("#mode2_container").set_class(detail_view, "hidden")

    def _update_display(self):
        """Update all panels from the scheduler's state."""
        if self.scheduler is None:
            return

        view = self.scheduler.get_shared_data().get_view()
        self.query_one("#header", Static).update(self._create_header(view))
        self.query_one("#hero", Static).update(
            build_hero(view.last_good, self.config.thresholds, self.config.display)
        )
        self.query_one("#details", Static).update(build_details(view.last_good))
        self.query_one("#history", Sparkline).data = view.history
        self.query_one("#history_summary", Static).update(history_summary(view.history))
        self.query_one("#error", Static).update(error_line(view.last_error))

    def _create_header(self, view: StateView) -> str:
        """Clock, version, mode and refresh indicator."""
        now = datetime.now().strftime(self.config.display.time_format)
        refreshing = self._is_refreshing or view.phase is RefreshPhase.REFRESHING
        indicator = " refreshing" if refreshing else ""

        interval = self.config.collection_intervals.battery
        interval_text = f"{interval}s" if interval > 0 else "manual"
        return (
            f"battmon v{__version__} - Mode: {self.display_mode}  "
            f"Time: {now}{indicator}  Interval: {interval_text}"
        )
