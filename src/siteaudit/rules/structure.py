from typing import List

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


@check_spec(names=["Has DOCTYPE", "HTML has lang attribute"])
def check_document_root(page: Page, site: SiteContext) -> List[CheckResult]:
    """Validates the doctype declaration and the language of the <html> root."""
    html = page.soup.find('html')
    return [
        result("Has DOCTYPE", "<!doctype html>" in page.raw.lower()),
        result("HTML has lang attribute", html is not None and html.get('lang') is not None),
    ]


@check_spec(names=["Has <head> element", "Has <title> element"])
def check_head(page: Page, site: SiteContext) -> List[CheckResult]:
    """The title must exist and carry text."""
    return [
        result("Has <head> element", page.soup.find('head') is not None),
        result("Has <title> element", bool(page.title_text)),
    ]


@check_spec(names=["Has charset meta", "Has viewport meta"])
def check_meta(page: Page, site: SiteContext) -> List[CheckResult]:
    """Checks the meta declarations listed in the config ('charset', 'viewport', ...)."""
    res = []
    for meta in site.config.required_meta:
        if meta == "charset":
            found = page.soup.find('meta', attrs={'charset': True})
        else:
            found = page.soup.find('meta', attrs={'name': meta})
        res.append(result(f"Has {meta} meta", found is not None))
    return res


@check_spec(names=["Has <body> element", "Links to {stylesheet}"])
def check_body_and_stylesheet(page: Page, site: SiteContext) -> List[CheckResult]:
    stylesheet = site.config.stylesheet
    return [
        result("Has <body> element", page.soup.find('body') is not None),
        result(f"Links to {stylesheet}", page.soup.find('link', attrs={'href': stylesheet}) is not None),
    ]


SUITE = SuiteDefinition(
    key="structure",
    title="🏗️  HTML Structure Tests",
    order=20,
    scope=Scope.PAGE,
    rules=[check_document_root, check_head, check_meta, check_body_and_stylesheet]
)
