"""Base command handler for verifile CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from verifile.config import Settings
from verifile.core.history import HistoryStorage
from verifile.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root and injects the loaded
    settings and the history store.
    """

    def __init__(self, settings: Settings, store: HistoryStorage) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Loaded settings
            store: History storage backend

        """
        self.settings = settings
        self.store = store

    @abstractmethod
    async def execute(self, args: Namespace) -> int:
        """Execute the command.

        Returns:
            Process exit status

        """
