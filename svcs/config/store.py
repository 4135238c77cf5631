"""Author configuration for SVCS.

The only persisted setting is the author name in ``vcs/config.txt``; it is
stamped onto every log entry.
"""

from __future__ import annotations

from ..core.context import StoreContext
from ..core.results import CommandResult, Status, invalid_arguments
from ..utils.fs import read_text, write_text


UNKNOWN_AUTHOR = "Please, tell me who you are."


class ConfigStore:
    """Reads and writes the author name."""

    def __init__(self, context: StoreContext):
        self.context = context

    def author(self) -> str:
        """Get the configured author name (empty if unset)."""
        return read_text(self.context.config_file)

    def set_author(self, name: str) -> None:
        write_text(self.context.config_file, name)

    def configure(self, args: list[str]) -> CommandResult:
        """Show the author name, or set it.
        
        Args:
            args: Empty to show, or the new author name
            
        Returns:
            CommandResult with the current name
        """
        if len(args) > 1:
            return invalid_arguments()

        if args:
            self.set_author(args[0])
            return CommandResult(Status.OK, f"The username is {args[0]}.")

        author = self.author()
        if not author:
            return CommandResult(Status.OK, UNKNOWN_AUTHOR)
        return CommandResult(Status.OK, f"The username is {author}.")
