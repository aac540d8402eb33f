# tests/core/test_qngine.py
from siteaudit.controllers.audit_controller import AuditController
from siteaudit.dom.core import Scope, SuiteDefinition, check_spec, result
from siteaudit.dom.qngine import QNGINE
from siteaudit.dom.registry import RuleRegistry
from siteaudit.model import SiteConfig
from site_factory import render_page, write_site

# files 4 + structure 24 + navigation 18 + links 9 + semantics 9 + form 8 + accessibility 4 + css 3
VALID_SITE_CHECKS = 79


def failed_names(report):
    return [r.name for r in report.failures]


def test_registry_discovers_suites_in_run_order():
    RuleRegistry.discover()
    keys = [s.key for s in RuleRegistry.get_all_suites()]
    assert keys == ["files", "structure", "navigation", "links", "semantics", "form", "accessibility", "css"]
    form = next(s for s in RuleRegistry.get_all_suites() if s.key == "form")
    assert '{field} has type="{type}"' in form.checks


def test_valid_site_passes_everything(site_root, run_site):
    report = run_site(site_root)
    assert failed_names(report) == []
    assert report.passed == VALID_SITE_CHECKS
    assert report.exit_code == 0


def test_results_carry_suite_and_page(site_root, run_site):
    report = run_site(site_root)
    first = report.results[0]
    assert (first.suite, first.page, first.name) == ("files", None, "index.html exists")

    structure = [r for r in report.results if r.suite == "structure"]
    assert [r.page for r in structure[:8]] == ["index.html"] * 8
    assert {r.page for r in report.results if r.suite == "form"} == {"contact.html"}


def test_two_runs_give_identical_counts(site_root, run_site):
    first, second = run_site(site_root), run_site(site_root)
    assert (first.passed, first.failed) == (second.passed, second.failed)
    assert first.results == second.results


def test_link_to_missing_page_fails_exactly_once(tmp_path, run_site):
    extra = '<a href="services.html">Services</a>'
    write_site(tmp_path, pages={"index.html": render_page("index.html", extra=extra)})

    report = run_site(tmp_path)
    assert failed_names(report) == ['Link "services.html" target exists']
    assert report.failures[0].page == "index.html"
    assert report.exit_code == 1


def test_removing_email_type_flips_exactly_one_check(tmp_path, run_site):
    html = render_page("contact.html").replace('type="email" id="email"', 'id="email"')
    write_site(tmp_path, pages={"contact.html": html})

    report = run_site(tmp_path)
    assert failed_names(report) == ['Email field has type="email"']
    assert report.passed == VALID_SITE_CHECKS - 1


def test_missing_alt_reports_count(tmp_path, run_site):
    extra = '<img src="hero.png">'
    write_site(tmp_path, pages={"about.html": render_page("about.html", extra=extra)})

    report = run_site(tmp_path)
    assert [(r.name, r.page, r.message) for r in report.failures] == [
        ("All images have alt attributes", "about.html", "1 images missing alt")
    ]


def test_missing_page_skips_its_checks(tmp_path, run_site):
    write_site(tmp_path, pages={"about.html": None})

    report = run_site(tmp_path)
    # Existence fails, plus the about.html links from the two remaining pages
    assert failed_names(report) == [
        "about.html exists",
        'Link "about.html" target exists',
        'Link "about.html" target exists',
    ]
    assert not any(r.page == "about.html" for r in report.results)


def test_missing_contact_page(tmp_path, run_site):
    write_site(tmp_path, pages={"contact.html": None})

    report = run_site(tmp_path)
    assert "contact.html loaded" in failed_names(report)
    assert not any(r.name == "Form inputs have associated labels" for r in report.results)


def test_missing_stylesheet_is_reported_twice(tmp_path, run_site):
    """Once by the existence suite and once by the CSS suite."""
    write_site(tmp_path, stylesheet=None)
    report = run_site(tmp_path)
    assert failed_names(report) == ["styles.css exists", "styles.css exists"]
    assert [r.suite for r in report.failures] == ["files", "css"]


def test_empty_root(tmp_path, run_site):
    report = run_site(tmp_path)
    assert report.passed == 0
    # 3 pages + stylesheet, the form page, the stylesheet again
    assert report.failed == 6


def test_crashing_rule_is_recorded_not_raised(site_root):
    @check_spec(names=["boom"])
    def explode(page, site):
        raise RuntimeError("kaboom")

    @check_spec(names=["fine"])
    def fine(page, site):
        return [result("fine", True)]

    suite = SuiteDefinition(key="custom", title="Custom", order=1, scope=Scope.SITE, rules=[explode, fine])
    controller = AuditController(SiteConfig(root=site_root), engine=QNGINE(suites=[suite]))
    report = controller.run_audit()

    assert (report.passed, report.failed) == (1, 1)
    assert report.failures[0].name == "explode"
    assert report.failures[0].message == "Rule error: kaboom"
    assert suite.checks == ["boom", "fine"]


def test_listener_receives_events_in_order(site_root):
    events = []
    controller = AuditController(SiteConfig(root=site_root))
    controller.run_audit(listener=lambda kind, payload: events.append(kind))

    assert events[0] == "suite"
    assert events.count("suite") == 8
    # One page grouping per page for each of the five per-page suites
    assert events.count("page") == 15
    assert events.count("result") == VALID_SITE_CHECKS
