"""Command handlers for the interface layer.

Each handler serves one (resource, action) pair of the CLI and returns a
plain dictionary that the formatters render:

- patterns list / show / run
- config show / validate
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pattern_catalog.application.service import CatalogService
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.domain.base.exceptions import ValidationError
from pattern_catalog.infrastructure.logging.logger import get_logger


class CLICommandHandler(ABC):
    """Base class for CLI command handlers."""

    def __init__(
        self,
        catalog_service: CatalogService,
        config_manager: ConfigurationManager,
        logger=None,
    ):
        """Initialize handler with injected dependencies.

        Args:
            catalog_service: Service used to read and run pattern units
            config_manager: Active configuration manager
            logger: Logger instance for logging operations
        """
        self.catalog_service = catalog_service
        self.config_manager = config_manager
        self.logger = logger or get_logger(__name__)

    @abstractmethod
    def handle(self, args) -> Dict[str, Any]:
        """Handle the parsed command line arguments."""


class ListPatternsCLIHandler(CLICommandHandler):
    """Handler for 'patterns list'."""

    def handle(self, args) -> Dict[str, Any]:
        category = getattr(args, "category", None)
        self.logger.debug("Listing patterns", category=category)
        patterns = self.catalog_service.list_patterns(category)
        return {"patterns": [summary.to_dict() for summary in patterns]}


class ShowPatternCLIHandler(CLICommandHandler):
    """Handler for 'patterns show KEY'."""

    def handle(self, args) -> Dict[str, Any]:
        detail = self.catalog_service.get_pattern(args.pattern)
        return {"pattern": detail.to_dict()}


class RunPatternCLIHandler(CLICommandHandler):
    """Handler for 'patterns run KEY' and 'patterns run --all'."""

    def handle(self, args) -> Dict[str, Any]:
        run_all = getattr(args, "all", False)
        pattern = getattr(args, "pattern", None)

        if run_all:
            results = self.catalog_service.run_all()
        elif pattern:
            results = [self.catalog_service.run_pattern(pattern)]
        else:
            raise ValidationError("Specify a pattern to run or use --all")

        return {"runs": [result.to_dict() for result in results]}


class ShowConfigCLIHandler(CLICommandHandler):
    """Handler for 'config show'."""

    def handle(self, args) -> Dict[str, Any]:
        return {"config": self.config_manager.app_config.model_dump(mode="json")}


class ValidateConfigCLIHandler(CLICommandHandler):
    """Handler for 'config validate [--file F]'.

    Validation failures propagate as ConfigurationError so the CLI reports
    them and exits non-zero.
    """

    def handle(self, args) -> Dict[str, Any]:
        config_file: Optional[str] = getattr(args, "file", None)
        manager = ConfigurationManager(config_file) if config_file else self.config_manager
        manager.app_config  # loads and validates
        self.logger.info("Configuration is valid", config_file=manager.config_file)
        return {"valid": True, "config_file": manager.config_file}
