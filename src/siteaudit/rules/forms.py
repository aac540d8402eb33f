from typing import List, Optional

from siteaudit.model import CheckResult, Page
from ..dom.core import Scope, SiteContext, SuiteDefinition, check_spec, result


@check_spec(names=[
    "{form_page} loaded", "Has <form> element", "Has {field}", '{field} has type="{type}"',
    "Has submit button", "Form fields have labels",
])
def check_contact_form(page: Optional[Page], site: SiteContext) -> List[CheckResult]:
    """
    Validates that the contact form exposes every required named control.
    A missing form page collapses into a single failure.
    """
    form_page = site.config.form_page
    if page is None:
        return [result(f"{form_page} loaded", False, f"Could not load {form_page}")]

    soup = page.soup
    res = [result("Has <form> element", soup.find('form') is not None)]

    for field in site.config.form_fields:
        res.append(result(f"Has {field.label}", soup.find(field.tag, attrs={'name': field.name}) is not None))

    # Fields declaring a semantic input type, e.g. the email field
    for field in site.config.form_fields:
        if field.type:
            found = soup.find(field.tag, attrs={'name': field.name, 'type': field.type})
            res.append(result(f'{field.label} has type="{field.type}"', found is not None))

    submit = soup.select_one('button[type="submit"], input[type="submit"]')
    res.append(result("Has submit button", submit is not None))

    labels = soup.select('form label')
    res.append(result(
        "Form fields have labels",
        len(labels) >= site.config.min_form_labels,
        f"Found {len(labels)} labels, expected at least {site.config.min_form_labels}"
    ))
    return res


SUITE = SuiteDefinition(
    key="form",
    title="📝 Contact Form Tests",
    order=60,
    scope=Scope.FORM,
    rules=[check_contact_form]
)
