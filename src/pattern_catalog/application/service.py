"""Catalog application service - list, show and run pattern units."""
from typing import List, Optional, Union

from pattern_catalog.application.dto import PatternDetail, PatternRunResult, PatternSummary
from pattern_catalog.domain.base.exceptions import ValidationError
from pattern_catalog.domain.base.pattern_unit import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_discovery import discover_patterns
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class CatalogService:
    """
    Application service over the pattern registry.

    The service never couples units together: it only reads their metadata
    and runs each example in isolation.
    """

    def __init__(self, registry: Optional[PatternRegistry] = None):
        """
        Initialize the service.

        Args:
            registry: Registry to read from; the process-wide registry,
                populated by discovery, when omitted
        """
        self._registry = registry if registry is not None else discover_patterns()
        self.logger = get_logger(__name__)

    def list_patterns(
        self, category: Optional[Union[PatternCategory, str]] = None
    ) -> List[PatternSummary]:
        """Summaries of registered patterns in catalog order, optionally by category."""
        category_filter = self._parse_category(category)
        keys = self._registry.get_registered_keys(category_filter)
        return [PatternSummary.from_unit(self._registry.get(key).unit) for key in keys]

    def get_pattern(self, key: str) -> PatternDetail:
        """
        Full documentation of one pattern.

        Raises:
            PatternNotFoundError: If the key is unknown
        """
        return PatternDetail.from_unit(self._registry.get(key).unit)

    def run_pattern(self, key: str) -> PatternRunResult:
        """
        Run one example and capture its output.

        Raises:
            PatternNotFoundError: If the key is unknown
        """
        example = self._registry.create(key)
        unit = example.unit

        self.logger.info("Running pattern example", key=unit.key)
        lines = example.render()
        matches = lines == unit.sample_output
        if not matches:
            self.logger.warning(
                "Example output differs from documented sample",
                key=unit.key,
                expected=unit.sample_output,
                actual=lines,
            )

        return PatternRunResult(key=unit.key, name=unit.name, output=lines, matches_sample=matches)

    def run_all(self) -> List[PatternRunResult]:
        return [self.run_pattern(key) for key in self._registry.get_registered_keys()]

    @staticmethod
    def _parse_category(
        category: Optional[Union[PatternCategory, str]]
    ) -> Optional[PatternCategory]:
        if category is None or isinstance(category, PatternCategory):
            return category
        try:
            return PatternCategory(category.lower())
        except ValueError as e:
            valid = [c.value for c in PatternCategory]
            raise ValidationError(
                f"Unknown category '{category}', expected one of {valid}", {"category": category}
            ) from e
