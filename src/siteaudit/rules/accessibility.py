from typing import List

from bs4 import BeautifulSoup, Tag

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result

# Controls that are labelled by their own value or never shown
UNLABELLED_INPUT_TYPES = {"hidden", "submit", "button", "reset", "image"}


def has_accessible_name(control: Tag, soup: BeautifulSoup) -> bool:
    """A control is named by label[for=id], a wrapping <label>, or aria-label/aria-labelledby."""
    control_id = control.get('id')
    if control_id and soup.find('label', attrs={'for': control_id}) is not None:
        return True
    if control.find_parent('label') is not None:
        return True
    for attr in ('aria-label', 'aria-labelledby'):
        value = control.get(attr)
        if value and value.strip():
            return True
    return False


@check_spec(names=["All images have alt attributes"])
def check_image_alt(page: Page, site: SiteContext) -> List[CheckResult]:
    missing = 0
    for img in page.soup.find_all('img'):
        alt = img.get('alt')
        if not alt or not alt.strip():
            missing += 1
    return [result("All images have alt attributes", missing == 0, f"{missing} images missing alt")]


@check_spec(names=["Form inputs have associated labels"])
def check_form_labels(page: Page, site: SiteContext) -> List[CheckResult]:
    """Only evaluated on the form page."""
    if page.name != site.config.form_page:
        return []

    missing = 0
    for control in page.soup.find_all(['input', 'textarea']):
        if control.name == 'input' and (control.get('type') or '').lower() in UNLABELLED_INPUT_TYPES:
            continue
        if not has_accessible_name(control, page.soup):
            missing += 1
    return [result("Form inputs have associated labels", missing == 0, f"{missing} inputs missing labels")]


SUITE = SuiteDefinition(
    key="accessibility",
    title="♿ Accessibility Tests",
    order=70,
    scope=Scope.PAGE,
    rules=[check_image_alt, check_form_labels]
)
