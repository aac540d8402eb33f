import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from siteaudit.dom.core import SiteContext
from siteaudit.dom.loader import PageLoader
from siteaudit.dom.qngine import QNGINE, Listener
from siteaudit.model import Report, SiteConfig
from siteaudit.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class AuditController:
    """
    Orchestrates one validation run: loads the pages once, runs the engine,
    and optionally exports every result.
    """

    def __init__(self, config: SiteConfig, engine: Optional[QNGINE] = None):
        self.config = config
        self.engine = engine or QNGINE()
        self.loader = PageLoader(config.root)

    def build_context(self) -> SiteContext:
        """Reads every page (and the form page, if it is not one of them) exactly once."""
        names = list(self.config.pages)
        if self.config.form_page not in names:
            names.append(self.config.form_page)

        pages = self.loader.load_all(names)
        missing = [name for name, page in pages.items() if page is None]
        if missing:
            logger.warning("Pages not found under %s: %s", self.config.root, ", ".join(missing))

        return SiteContext(config=self.config, loader=self.loader, pages=pages)

    def run_audit(self, listener: Optional[Listener] = None) -> Report:
        logger.info("Validating site at %s", self.config.root)
        site = self.build_context()
        return self.engine.run_audit(site, listener=listener)

    def export_results(self, report: Report, output: str) -> Optional[Path]:
        """
        Writes every result to CSV or Excel, chosen by file extension.
        Returns the written path, or None when the export failed.
        """
        df = pd.DataFrame(
            [r.as_row() for r in report.results],
            columns=["Suite", "Page", "Check", "Passed", "Message"]
        )

        try:
            output_file = PathUtils.resolve_output_path(output)
            if output_file.suffix.lower() in (".xlsx", ".xls"):
                df.to_excel(output_file, index=False, engine='openpyxl')
            else:
                df.to_csv(output_file, index=False)
        except (OSError, ValueError, ImportError) as e:
            logger.error(f"Failed to export results to {output}: {e}")
            return None

        logger.info(f"Exported {len(df)} results to {output_file}")
        return output_file
