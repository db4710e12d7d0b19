"""Combined search command."""

from typing import final

from lastfmapi.platform.logging import logger
from lastfmapi.ui.cli.args.options import SearchArgs
from lastfmapi.ui.cli.commands.executor import ClientFactory, CommandExecutor
from lastfmapi.ui.cli.display.result import ResultDisplay


@final
class SearchCommand(CommandExecutor):
    """Run ``LastFM.search`` and render the merged result."""

    def __init__(
        self,
        args: SearchArgs,
        *,
        client_factory: ClientFactory | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        super().__init__(
            args.api_key,
            client_factory=client_factory,
            result_display=result_display,
        )
        self.args = args

    def execute(self) -> None:
        logger.debug("Searching for '%s'", self.args.query)
        result = self.client.search(
            self.args.query,
            limit=self.args.limit,
            page=self.args.page,
        )
        if self.args.as_json:
            self.result_display.show_json(result, quiet=self.args.quiet)
            return
        self.result_display.show_search(result, quiet=self.args.quiet)
