"""Interface layer - CLI command handlers."""

from .command_handlers import (
    CLICommandHandler,
    ListPatternsCLIHandler,
    RunPatternCLIHandler,
    ShowConfigCLIHandler,
    ShowPatternCLIHandler,
    ValidateConfigCLIHandler,
)

__all__ = [
    "CLICommandHandler",
    "ListPatternsCLIHandler",
    "ShowPatternCLIHandler",
    "RunPatternCLIHandler",
    "ShowConfigCLIHandler",
    "ValidateConfigCLIHandler",
]
