# src/siteaudit/cli.py
import argparse
import logging
from typing import List, Optional

from siteaudit.controllers.audit_controller import AuditController
from siteaudit.dom.registry import RuleRegistry
from siteaudit.managers.config_manager import config_manager
from siteaudit.model import SiteConfig
from siteaudit.output.console import ConsoleReporter
from siteaudit.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-tests",
        description="Validate the structure, navigation, links and forms of the static site."
    )
    parser.add_argument("--root", type=str, default=None, help="Site root (default: current directory).")
    parser.add_argument("--export", type=str, default=None, help="Write every result to a .csv or .xlsx file.")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING...).")
    parser.add_argument("--no-color", action="store_true", help="Disable colored markers.")
    parser.add_argument("--list-checks", action="store_true", help="List every suite and its checks, then exit.")
    return parser


def list_checks() -> int:
    """Prints the registered suites in run order with the check names each can emit."""
    RuleRegistry.discover()
    for suite in RuleRegistry.get_all_suites():
        print(f"{suite.title}  [{suite.key}, {suite.scope.value}]")
        for name in suite.checks:
            print(f"  - {name}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the full battery and returns the process exit code:
    0 when every check passed, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    configure_logger(args.log_level or config_manager.get_nested("debug.level", "WARNING"))

    if args.list_checks:
        return list_checks()

    config = SiteConfig.from_settings(config_manager.get_nested("site", {}), root=args.root)
    reporter = ConsoleReporter(use_colors=not args.no_color)
    controller = AuditController(config)

    reporter.header(config.name)
    report = controller.run_audit(listener=reporter)
    reporter.summary(report)

    if args.export:
        written = controller.export_results(report, args.export)
        if written:
            print(f"📄 Results exported to {written}")

    return report.exit_code
