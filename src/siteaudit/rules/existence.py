from typing import List, Optional

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


@check_spec(names=["{file} exists"])
def check_pages_exist(_page: Optional[Page], site: SiteContext) -> List[CheckResult]:
    """Every configured page must be present under the site root."""
    res = []
    for name in site.config.pages:
        path = site.config.root / name
        res.append(result(f"{name} exists", path.is_file(), f"File not found: {path}"))
    return res


@check_spec(names=["{stylesheet} exists"])
def check_stylesheet_exists(_page: Optional[Page], site: SiteContext) -> List[CheckResult]:
    name = site.config.stylesheet
    return [result(f"{name} exists", site.config.stylesheet_path.is_file(), "Stylesheet not found")]


SUITE = SuiteDefinition(
    key="files",
    title="📁 File Existence Tests",
    order=10,
    scope=Scope.SITE,
    rules=[check_pages_exist, check_stylesheet_exists]
)
