import re
from typing import List, Optional

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result

ROOT_TOKENS = re.compile(r':root\s*\{[^}]*--[\w-]+\s*:', re.DOTALL)


@check_spec(names=[
    "{stylesheet} exists", "Uses CSS custom properties",
    "Has media queries for responsiveness", "Has CSS animations",
])
def check_stylesheet(_page: Optional[Page], site: SiteContext) -> List[CheckResult]:
    """
    Checks the shared stylesheet for design tokens, breakpoints and animations.
    Plain substring tests, the stylesheet is not parsed.
    """
    name = site.config.stylesheet
    css = site.loader.read_text(name)
    if css is None:
        return [result(f"{name} exists", False, "Stylesheet not found")]

    return [
        result("Uses CSS custom properties", ROOT_TOKENS.search(css) is not None),
        result("Has media queries for responsiveness", "@media" in css),
        result("Has CSS animations", "@keyframes" in css),
    ]


SUITE = SuiteDefinition(
    key="css",
    title="🎨 CSS Tests",
    order=80,
    scope=Scope.SITE,
    rules=[check_stylesheet]
)
