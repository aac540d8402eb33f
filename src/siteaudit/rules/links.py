from pathlib import Path
from typing import List
from urllib.parse import urlparse

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


def is_internal(href: str) -> bool:
    """
    True for links resolved against the site root.
    Anything with a scheme or host (http:, https:, mailto:, tel:, //cdn) and
    same-page fragments are not internal.
    """
    href = href.strip()
    if not href or href.startswith('#'):
        return False
    parsed = urlparse(href)
    return not parsed.scheme and not parsed.netloc


def collect_internal_links(page: Page) -> List[str]:
    """Unique internal hrefs in document order."""
    seen = []
    for a in page.soup.find_all('a', href=True):
        href = a['href']
        if is_internal(href) and href not in seen:
            seen.append(href)
    return seen


DIRECTORY_INDEX = "index.html"


def target_path(href: str, root: Path) -> Path:
    """
    Resolves an internal href to the file a static server would return.
    Query and fragment are dropped ('about.html#team' -> about.html) and
    directory links ('/', 'team/') resolve to their index.html.
    """
    path = urlparse(href.strip()).path
    target = root / path.lstrip('/')
    if not path or path.endswith('/') or target.is_dir():
        target = target / DIRECTORY_INDEX
    return target


@check_spec(names=['Link "{href}" target exists'])
def check_internal_links(page: Page, site: SiteContext) -> List[CheckResult]:
    res = []
    for href in collect_internal_links(page):
        target = target_path(href, site.config.root)
        res.append(result(
            f'Link "{href}" target exists',
            target.is_file(),
            f"Target not found: {target}"
        ))
    return res


SUITE = SuiteDefinition(
    key="links",
    title="🔗 Internal Link Tests",
    order=40,
    scope=Scope.PAGE,
    rules=[check_internal_links]
)
