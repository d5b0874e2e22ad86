"""Application bootstrap - wires configuration, logging and the catalog."""

from __future__ import annotations

from typing import Optional

from patternbook.application.catalog_service import CatalogService
from patternbook.config import AppConfig, ConfigurationManager, get_config_manager
from patternbook.config.schemas import LogLevel
from patternbook.infrastructure.logging.logger import get_logger, setup_logging
from patternbook.infrastructure.registry.pattern_registry import get_pattern_registry


class Application:
    """Application context with lazy initialization."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False

        # Defer heavy initialization until first use
        self._config_manager: Optional[ConfigurationManager] = None
        self._catalog_service: Optional[CatalogService] = None

        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    def initialize(self) -> bool:
        """Configure logging and load the pattern catalog."""
        if self._initialized:
            return True

        logging_config = self.config.logging
        if self.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(self.log_level.upper())})
        setup_logging(logging_config)

        registry = get_pattern_registry()
        self._catalog_service = CatalogService(
            registry=registry,
            logger=get_logger("patternbook.catalog"),
            config=self.config.catalog,
        )

        self._initialized = True
        self.logger.info("Application initialized", patterns=len(registry))
        return True

    @property
    def catalog_service(self) -> CatalogService:
        if not self._initialized:
            self.initialize()
        return self._catalog_service


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    app = Application(config_path, log_level)
    app.initialize()
    return app
