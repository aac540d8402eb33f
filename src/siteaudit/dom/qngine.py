# src/siteaudit/dom/qngine.py
import logging
from typing import Callable, List, Optional

from siteaudit.model import CheckResult, Page, Report
from .core import Scope, SiteContext, SuiteDefinition
from .registry import RuleRegistry

logger = logging.getLogger(__name__)

# Called for every suite header, page grouping and result while the engine runs
Listener = Callable[[str, object], None]


class QNGINE:
    """
    Quality Engine (QNGINE) for validating a static site.

    Applies every registered suite, in order, to the pages it is scoped to and
    folds the results into an immutable Report. Rules never abort the run: a rule
    that raises is recorded as a failed check.
    """

    def __init__(self, suites: Optional[List[SuiteDefinition]] = None):
        if suites is None:
            RuleRegistry.discover()
            suites = RuleRegistry.get_all_suites()
        self.suites = suites

    def run_audit(self, site: SiteContext, listener: Optional[Listener] = None) -> Report:
        """
        Runs the full battery against the site.

        Args:
            site: Loaded pages plus configuration.
            listener: Optional callback receiving ('suite', SuiteDefinition),
                      ('page', name) and ('result', CheckResult) events in run order.

        Returns:
            Report: The folded outcome of every check.
        """
        notify = listener or (lambda kind, payload: None)
        report = Report()

        for suite in self.suites:
            notify("suite", suite)
            for page_name, page in self._targets(suite, site):
                if page_name and suite.scope == Scope.PAGE:
                    notify("page", page_name)
                results = self.run_suite(suite, page, site, page_name)
                for res in results:
                    notify("result", res)
                report = report.extend(results)

        logger.info("Audit finished: %d checks, %d passed, %d failed", report.total, report.passed, report.failed)
        return report

    def run_suite(
            self,
            suite: SuiteDefinition,
            page: Optional[Page],
            site: SiteContext,
            page_name: Optional[str] = None,
    ) -> List[CheckResult]:
        """Evaluates one suite against one target and stamps suite and page onto each result."""
        results: List[CheckResult] = []
        for rule in suite.rules:
            try:
                produced = rule(page, site) or []
            except Exception as e:
                logger.error("Rule %s crashed on %s: %s", rule.__name__, page_name or "site", e, exc_info=True)
                produced = [CheckResult(name=rule.__name__, passed=False, message=f"Rule error: {e}")]

            for res in produced:
                results.append(res.model_copy(update={"suite": suite.key, "page": page_name}))
        return results

    @staticmethod
    def _targets(suite: SuiteDefinition, site: SiteContext):
        """Yields (page_name, page) pairs the suite applies to."""
        if suite.scope == Scope.SITE:
            yield None, None
        elif suite.scope == Scope.FORM:
            name = site.config.form_page
            yield name, site.pages.get(name)
        else:
            for name in site.config.pages:
                page = site.pages.get(name)
                # Missing pages were reported by the existence suite already
                if page is None:
                    continue
                yield name, page
