"""CLI runner for verifile.

Routes parsed arguments to the matching command handler.
"""

from collections.abc import Sequence
from pathlib import Path

from verifile import __version__
from verifile.cli.commands import (
    AlgorithmsHandler,
    BaseCommandHandler,
    HistoryHandler,
    VerifyHandler,
)
from verifile.cli.parser import CLIParser
from verifile.config import SettingsManager
from verifile.core.history import HistoryStore
from verifile.logger import apply_log_levels, get_logger

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Load settings and build command handlers.

        Args:
            config_dir: Optional settings directory override

        """
        self.settings_manager = SettingsManager(config_dir)
        self.settings = self.settings_manager.load_settings()
        apply_log_levels(
            self.settings["console_log_level"], self.settings["log_level"]
        )

        self.store = HistoryStore(self.settings["history_file"])
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "verify": VerifyHandler(self.settings, self.store),
            "history": HistoryHandler(self.settings, self.store),
            "algorithms": AlgorithmsHandler(self.settings, self.store),
        }

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Returns:
            Process exit status

        """
        parser = CLIParser(self.settings["default_algorithm"])
        args = parser.parse_args(argv)

        if args.version:
            logger.info("verifile %s", __version__)
            return 0

        if not args.command:
            parser.build().print_help()
            return 0

        handler = self.command_handlers[args.command]
        return await handler.execute(args)
