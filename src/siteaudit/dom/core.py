from enum import Enum
from typing import Callable, Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict

from siteaudit.model import CheckResult, Page, SiteConfig
from siteaudit.dom.loader import PageLoader


def check_spec(names: List[str]):
    """
    Decorator to declare which check names a rule function can emit.
    Facilitates auto-discovery by the RuleRegistry.
    """
    def decorator(func):
        func.defined_checks = names
        return func
    return decorator


class Scope(str, Enum):
    PAGE = "page"    # run once per loaded page
    FORM = "form"    # run once against the form page, even if it is missing
    SITE = "site"    # run once with no page


class SiteContext(BaseModel):
    """Everything a rule may look at besides the page it is given."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    config: SiteConfig
    loader: PageLoader
    pages: Dict[str, Optional[Page]]


# A rule receives the page (None for site-scoped suites) and the site context
Rule = Callable[[Optional[Page], SiteContext], List[CheckResult]]


class SuiteDefinition:
    """
    Configuration object binding a group of rules to a console header and a scope.
    """

    def __init__(
            self,
            key: str,
            title: str,
            order: int,
            scope: Scope,
            rules: Optional[List[Rule]] = None,
    ):
        self.key = key
        self.title = title
        self.order = order
        self.scope = scope
        self.rules = rules or []

        # --- Auto-Discovery of Check Names ---
        names: Set[str] = set()
        for rule in self.rules:
            if hasattr(rule, 'defined_checks'):
                names.update(rule.defined_checks)

        self.checks = sorted(names)

    def __repr__(self) -> str:
        return f"SuiteDefinition(key={self.key!r}, order={self.order}, scope={self.scope.value})"


def result(name: str, passed: bool, message: str = "") -> CheckResult:
    """
    Shorthand used by rules. Suite and page are stamped on by the engine.
    The diagnostic is only kept for failed checks.
    """
    passed = bool(passed)
    return CheckResult(name=name, passed=passed, message="" if passed else message)
