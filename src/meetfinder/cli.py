"""Meeting Finder CLI."""

import json
import logging
import sys

import click

from .adapters.http_catalog import HttpCatalogSource
from .adapters.log_reporter import LoggingErrorReporter
from .adapters.query_file import FileQueryStore
from .config import QUERY_FILE, Config, load_config
from .core.meeting import Meeting, localize
from .core.state import FilterCategory
from .core.tags import resolve_tag
from .directory import Directory, RenderMode, View

SELECTION_OPTIONS = (
    ("days", FilterCategory.DAYS),
    ("times", FilterCategory.TIMES),
    ("formats", FilterCategory.FORMATS),
    ("types", FilterCategory.TYPES),
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Meeting Finder - browse the meeting directory."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def selection_options(f):
    """Options shared by commands that select a view."""
    f = click.option("--query", "-q", default=None, help="Start from an encoded query string")(f)
    f = click.option("--timezone", "-z", default=None, help="Show times in this IANA timezone")(f)
    f = click.option("--search", "-s", default="", help="Free-text search terms")(f)
    f = click.option("--type", "types", multiple=True, help="Meeting type (repeatable)")(f)
    f = click.option("--format", "formats", multiple=True, help="Meeting format")(f)
    f = click.option("--time", "times", multiple=True, help="Time of day (repeatable)")(f)
    f = click.option("--day", "days", multiple=True, help="Day of the week")(f)
    f = click.option("--url", "data_url", default=None, help="Catalog URL (overrides config)")(f)
    return f


def _open_directory(config: Config, data_url: str | None, remember: bool = False) -> Directory:
    """Build the directory and load the catalog, exiting on failure."""
    source = HttpCatalogSource(data_url or config.data_url, timeout=config.request_timeout)
    reporter = LoggingErrorReporter(environment=config.environment)
    store = FileQueryStore(QUERY_FILE) if remember else None
    directory = Directory(source, reporter, query_store=store, page_size=config.meetings_per_page)

    if not directory.start():
        click.echo("Error: Could not load the meeting catalog. Run with --debug for details.", err=True)
        sys.exit(1)
    return directory


def _apply_selection(directory: Directory, config: Config, selection: dict) -> None:
    """Apply query, tag, search and timezone options in that order."""
    if selection["query"]:
        directory.apply_query(selection["query"])

    for option, category in SELECTION_OPTIONS:
        for value in selection[option]:
            tag = resolve_tag(directory.state.filters, category, value)
            if tag is None:
                click.echo(f"Warning: no {category.value.lower()} tag '{value}'", err=True)
                continue
            directory.toggle_tag(category, tag, True)

    if selection["search"]:
        directory.set_search(selection["search"].split())

    timezone = selection["timezone"]
    if timezone is None and not directory.state.timezone:
        timezone = config.timezone
    if timezone:
        directory.set_timezone(timezone)


def _meeting_json(meeting: Meeting, timezone: str) -> dict:
    day, start = localize(meeting, timezone)
    return {
        "id": meeting.id,
        "name": meeting.name,
        "day": day,
        "time": start.strftime("%H:%M") if start else None,
        "timezone": timezone or meeting.timezone,
        "duration": meeting.duration,
        "formats": list(meeting.formats),
        "types": list(meeting.types),
        "location": meeting.location,
        "notes": meeting.notes,
        "url": meeting.url,
    }


def _show_view(view: View, timezone: str, as_json: bool) -> None:
    """Shared view display logic."""
    if as_json:
        click.echo(
            json.dumps(
                {
                    "tags": view.tags,
                    "query": view.query,
                    "total": view.total,
                    "has_more": view.has_more,
                    "meetings": [_meeting_json(m, timezone) for m in view.meetings],
                },
                indent=2,
            )
        )
        return

    if view.mode is RenderMode.NO_RESULTS:
        selected = ", ".join(view.tags) or "your search"
        click.echo(f"No meetings match {selected}.")
        return

    for meeting in view.meetings:
        day, start = localize(meeting, timezone)
        tags = ", ".join(meeting.formats + meeting.types)
        tags = f" [{tags}]" if tags else ""
        loc = f" @ {meeting.location}" if meeting.location else ""
        click.echo(f"  {day:9} {meeting.format_time(start):8} {meeting.name}{tags}{loc}")

    click.echo()
    click.echo(f"Showing {len(view.meetings)} of {view.total} meetings.")
    if view.has_more:
        click.echo("Use --pages to see more.")


@main.command("list")
@selection_options
@click.option("--pages", "-p", default=1, type=click.IntRange(min=1), help="Number of pages to show")
@click.option("--last", is_flag=True, help="Start from the previous view")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_meetings(pages: int, last: bool, as_json: bool, data_url: str | None, **selection):
    """List meetings matching the selection."""
    config = load_config()
    directory = _open_directory(config, data_url, remember=True)

    if last and not selection["query"]:
        selection["query"] = directory.query_store.get_query()
    _apply_selection(directory, config, selection)

    for _ in range(pages - 1):
        if not directory.load_more():
            break

    _show_view(directory.render(), directory.state.timezone, as_json)


@main.command()
@click.option("--url", "data_url", default=None, help="Catalog URL (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tags(data_url: str | None, as_json: bool):
    """List the tags available in each category."""
    config = load_config()
    directory = _open_directory(config, data_url)
    filters = directory.state.filters

    if as_json:
        click.echo(json.dumps({key: [t.tag for t in values] for key, values in filters.items()}, indent=2))
        return

    for category in FilterCategory:
        values = [t.tag for t in filters[category.value]]
        click.echo(f"{category.value}: {', '.join(values) if values else '(none)'}")


@main.command()
@selection_options
def link(data_url: str | None, **selection):
    """Print a shareable link for the selection."""
    config = load_config()
    directory = _open_directory(config, data_url)
    _apply_selection(directory, config, selection)

    query = directory.render().query
    base = config.site_url.rstrip("?")
    click.echo(f"{base}?{query}" if query else base or "(no filters selected)")


@main.command()
def reset():
    """Forget the previous view."""
    FileQueryStore(QUERY_FILE).clear()
    click.echo("Previous view cleared.")
