"""Interactive console session for browsing nearby stops."""

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

import aiohttp

from nearby_stops.adapters.config import AppConfig
from nearby_stops.adapters.feeds import create_stop_feed
from nearby_stops.adapters.location import ConfiguredLocationProvider
from nearby_stops.adapters.terminal import StopListFormatter
from nearby_stops.application.services import (
    NearbyStopsController,
    NearbyStopsPipeline,
    StopSearchController,
)
from nearby_stops.cli import configure_logging
from nearby_stops.domain.models import (
    Collapse,
    Intent,
    QueryChanged,
    Refresh,
    SelectStop,
    ShowMore,
)

logger = logging.getLogger(__name__)

HELP = "[m] show more  [c] collapse  [r] refresh  [/text] search  [s <id>] select  [q] quit"


def parse_command(line: str) -> Intent | None:
    """Translate one line of console input into an intent.

    Returns None for input that is not a command.
    """
    text = line.strip()
    if text.startswith("/"):
        return QueryChanged(text[1:].strip())
    if text == "m":
        return ShowMore()
    if text == "c":
        return Collapse()
    if text == "r":
        return Refresh()
    if text.startswith("s "):
        return SelectStop(text[2:].strip())
    return None


class ConsoleSession:
    """Routes console intents to the nearby and search controllers and renders the result."""

    def __init__(
        self,
        nearby: NearbyStopsController,
        search: StopSearchController,
        write: Callable[[str], None] = print,
    ) -> None:
        """Initialize the session.

        Args:
            nearby: Controller for the nearby stops list.
            search: Controller for the stop search.
            write: Sink for rendered lines.
        """
        self.nearby = nearby
        self.search = search
        self.write = write
        self.formatter = StopListFormatter()

    async def start(self) -> None:
        await asyncio.gather(self.nearby.refresh(), self.search.load())
        self.render()

    def render(self) -> None:
        if self.search.query:
            lines = self.formatter.format_search(self.search.view())
            selected = self.search.view().selected
        else:
            view = self.nearby.view()
            lines = self.formatter.format_nearby(view)
            selected = view.selected
        if selected is not None:
            lines.append(f"Selected: {self.formatter.format_stop(selected)}")
        self.write("\n".join(lines))

    async def dispatch(self, intent: Intent) -> None:
        """Apply one intent and render."""
        if isinstance(intent, QueryChanged):
            await self.search.handle(intent)
        elif isinstance(intent, SelectStop) and self.search.query:
            await self.search.handle(intent)
        elif isinstance(intent, Refresh):
            await asyncio.gather(self.nearby.handle(intent), self.search.handle(intent))
        else:
            await self.nearby.handle(intent)
        self.render()

    async def run(self, read_line: Callable[[], Awaitable[str]]) -> None:
        """Read commands until ``q`` or end of input."""
        await self.start()
        self.write(HELP)
        while True:
            try:
                line = await read_line()
            except EOFError:
                break
            if line.strip() == "q":
                break
            intent = parse_command(line)
            if intent is None:
                self.write(HELP)
                continue
            await self.dispatch(intent)


async def _read_stdin_line() -> str:
    return await asyncio.to_thread(input, "> ")


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    if config.config_file:
        config.load_toml_overrides()
    configure_logging(config.log_level)

    async with aiohttp.ClientSession() as session:
        try:
            stop_feed = create_stop_feed(config, session)
        except ValueError as e:
            logger.error(f"Invalid feed configuration: {e}")
            sys.exit(1)

        location_provider = ConfiguredLocationProvider(
            config.latitude,
            config.longitude,
            permission_granted=config.location_permission_granted,
        )
        pipeline = NearbyStopsPipeline(
            location_provider,
            stop_feed,
            unit=config.unit_mode,  # type: ignore[arg-type]
        )
        console = ConsoleSession(
            NearbyStopsController(pipeline, config.disclosure_settings()),
            StopSearchController(stop_feed),
        )
        try:
            await console.run(_read_stdin_line)
        except KeyboardInterrupt:
            logger.info("Shutting down...")


def console_main() -> None:
    """Synchronous entry point for the console session."""
    asyncio.run(main())


if __name__ == "__main__":
    console_main()
