"""Single-operation command printing JSON."""

from typing import final

from lastfmapi.ui.cli.args.options import CallArgs
from lastfmapi.ui.cli.commands.executor import ClientFactory, CommandExecutor
from lastfmapi.ui.cli.display.result import ResultDisplay


@final
class CallCommand(CommandExecutor):
    """Dispatch one operation id to the client and print its result."""

    def __init__(
        self,
        args: CallArgs,
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
        result = self.client.call(self.args.operation, **self.args.params)
        if result is None:
            # Correction endpoints answer with nothing when the name is canonical.
            self.result_display.show_json({}, quiet=self.args.quiet)
            return
        self.result_display.show_json(result, quiet=self.args.quiet)
