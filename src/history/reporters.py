"""Timeline reporters."""

import json

from rich.console import Console
from rich.markup import escape

from common.logger import console as default_console

from .models import ChangeEvent, History
from .timeline import flatten

ACTION_STYLES = {
    "added": "green",
    "removed": "red",
    "updated": "blue",
}

ACTION_TAGS = {
    "added": "🟩",
    "removed": "🟥",
    "updated": "🟦",
}


def action_style(action: str) -> str:
    """Rich style for an action."""
    return ACTION_STYLES.get(action, "bright_black")


def action_tag(action: str) -> str:
    """Coloured square marker for an action."""
    return f"[{action_style(action)}]{ACTION_TAGS.get(action, '⬜')}[/]"


def format_version(event: ChangeEvent) -> str:
    if event.action == "updated" and event.version_from and event.version_to:
        return f" ({event.version_from} → {event.version_to})"
    if event.version:
        return f" ({event.version})"
    return ""


def format_reference(event: ChangeEvent) -> str:
    if event.reference is not None:
        return f"PR #{str(event.reference).rjust(4)}"
    if event.commit_id:
        return event.short_id
    return "—"


class TimelineReporter:
    """Format and display a manifest's change timeline."""

    def __init__(
        self,
        console: Console | None = None,
        related: dict[str, list[str]] | None = None,
    ):
        """Initialize the reporter.

        Args:
            console: Console to print to (default: the shared logging console)
            related: Optional dependency name -> related repositories mapping
        """
        self.console = console or default_console
        self.related = related or {}

    def format_event(self, event: ChangeEvent) -> str:
        """Render one event as a single rich-markup line."""
        label = event.action.capitalize().ljust(8)
        style = action_style(event.action)
        dependency = escape((event.name + format_version(event)).ljust(20))

        line = (
            f"{action_tag(event.action)} {event.timestamp.strftime('%Y-%m-%d')}  "
            f"{label} [{style}]{dependency}[/] by {escape(event.author.ljust(10))} "
            f"➜ {format_reference(event)} | {escape(event.message)}"
        )

        repos = self.related.get(event.name)
        if repos:
            line += f"\n    ↳ related: {escape(', '.join(repos))}"
        return line

    def report_console(self, history: History, manifest: str = "Gemfile") -> None:
        """Print the timeline, oldest change first. Prints nothing for an empty history."""
        if not history:
            return

        self.console.print(f"\n📜 {escape(manifest)} History Timeline\n")
        for event in flatten(history):
            self.console.print(self.format_event(event), highlight=False)

    def report_json(self, history: History) -> str:
        """Format the timeline as a JSON array, oldest change first."""
        return json.dumps([event.to_dict() for event in flatten(history)], indent=2)
