"""src/lastfmapi/ui/cli/commands/executor.py
What: Provide shared wiring for CLI commands that talk to Last.fm.
Why: Reuse client construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import replace

from lastfmapi.config.config import Config
from lastfmapi.platform.lastfm.client import LastFM
from lastfmapi.ui.cli.display.result import ResultDisplay

ClientFactory = Callable[[str | None], LastFM]


def build_client(api_key: str | None = None) -> LastFM:
    """Create a client from the loaded configuration.

    Args:
        api_key: Key given on the command line; wins over the config file.
    """
    config = Config.load()
    return LastFM.from_config(replace(config, api_key=api_key or config.api_key))


class CommandExecutor(ABC):
    """Base class for commands that issue Last.fm requests."""

    client: LastFM
    result_display: ResultDisplay

    def __init__(
        self,
        api_key: str | None,
        *,
        client_factory: ClientFactory | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        factory = client_factory or build_client
        self.client = factory(api_key)
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
