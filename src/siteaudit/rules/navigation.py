from typing import List

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


@check_spec(names=["Has <nav> element", "Nav includes link to {link}"])
def check_nav_links(page: Page, site: SiteContext) -> List[CheckResult]:
    """The navigation must link to every known page."""
    nav_hrefs = {a.get('href') for a in page.soup.select('nav a[href]')}
    res = [result("Has <nav> element", page.soup.find('nav') is not None)]
    for link in site.config.nav_links:
        res.append(result(f"Nav includes link to {link}", link in nav_hrefs))
    return res


@check_spec(names=["Current page has active nav state", "Only current page is marked active"])
def check_active_state(page: Page, site: SiteContext) -> List[CheckResult]:
    """
    Rule: the current page's nav link carries the active class, and no other link does.
    """
    cfg = site.config
    current = page.soup.select_one(f"nav .{cfg.nav_link_class}.{cfg.active_class}")
    active_href = current.get('href') if current else None

    others = []
    for a in page.soup.select(f"nav a.{cfg.active_class}"):
        href = a.get('href')
        if href != page.name and href not in others:
            others.append(href)

    return [
        result(
            "Current page has active nav state",
            active_href == page.name,
            f"Expected {page.name}, got {active_href}"
        ),
        result(
            "Only current page is marked active",
            not others,
            f"Also marked active: {', '.join(str(h) for h in others)}"
        ),
    ]


SUITE = SuiteDefinition(
    key="navigation",
    title="🧭 Navigation Tests",
    order=30,
    scope=Scope.PAGE,
    rules=[check_nav_links, check_active_state]
)
