# src/siteaudit/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, List

from .core import SuiteDefinition

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for check suites.

    Dynamically discovers and loads SuiteDefinition modules from the
    'siteaudit.rules' package. Suites are returned sorted by their 'order'
    so a run is deterministic regardless of module discovery order.
    """

    _suites: Dict[str, SuiteDefinition] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Registers every module in 'siteaudit.rules' that exposes a
        `SUITE` attribute (instance of `SuiteDefinition`).
        """
        if cls._loaded:
            return

        try:
            import siteaudit.rules as rules_pkg

            for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
                full_name = f"siteaudit.rules.{name}"
                try:
                    module = importlib.import_module(full_name)
                except ImportError as e:
                    logger.error(f"Error loading rule module {name}: {e}")
                    continue

                suite = getattr(module, "SUITE", None)
                if isinstance(suite, SuiteDefinition):
                    cls.register(suite)
                    logger.debug(f"Suite loaded: {suite.key} ({len(suite.rules)} rules)")

            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find rules package: {e}")

    @classmethod
    def register(cls, suite: SuiteDefinition) -> None:
        """Registers a suite, replacing any earlier suite with the same key."""
        cls._suites[suite.key] = suite

    @classmethod
    def get_all_suites(cls) -> List[SuiteDefinition]:
        """Returns the registered suites in run order."""
        return sorted(cls._suites.values(), key=lambda s: s.order)

