from typing import List

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


@check_spec(names=["Has <h1> element", "Has <footer> element", "Has <section> elements"])
def check_landmarks(page: Page, site: SiteContext) -> List[CheckResult]:
    soup = page.soup
    return [
        result("Has <h1> element", soup.find('h1') is not None),
        result("Has <footer> element", soup.find('footer') is not None),
        result("Has <section> elements", soup.find('section') is not None),
    ]


SUITE = SuiteDefinition(
    key="semantics",
    title="📐 Semantic Structure Tests",
    order=50,
    scope=Scope.PAGE,
    rules=[check_landmarks]
)
