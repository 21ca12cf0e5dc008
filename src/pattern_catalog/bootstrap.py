"""Application bootstrap - wires configuration, logging and the catalog service."""

from __future__ import annotations

from typing import Optional

from pattern_catalog.application.service import CatalogService
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton


class Application:
    """Application context: configuration manager plus catalog service."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        self.config_path = config_path
        self.log_level = log_level
        self.logger = get_logger(__name__)
        self._config_manager: Optional[ConfigurationManager] = None
        self._catalog_service: Optional[CatalogService] = None

    def initialize(self) -> "Application":
        """
        Load configuration, configure logging and discover patterns.

        Raises:
            ConfigurationError: If the configuration cannot be loaded or validated
        """
        config_manager = ConfigurationManager(self.config_path)
        logging_config = config_manager.get_logging_config()
        if self.log_level:
            logging_config = logging_config.model_copy(update={"level": self.log_level.upper()})
        setup_logging(logging_config)

        self._config_manager = config_manager
        self._catalog_service = get_singleton(CatalogService)

        self.logger.debug(
            "Application initialized",
            config_file=config_manager.config_file,
            environment=config_manager.app_config.environment,
        )
        return self

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            raise RuntimeError("Application not initialized")
        return self._config_manager

    @property
    def catalog_service(self) -> CatalogService:
        if self._catalog_service is None:
            raise RuntimeError("Application not initialized")
        return self._catalog_service


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path, log_level).initialize()
