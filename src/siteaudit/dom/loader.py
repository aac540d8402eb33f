# src/siteaudit/dom/loader.py
import logging
from pathlib import Path
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from siteaudit.model import Page

logger = logging.getLogger(__name__)


class PageLoader:
    """
    Reads the site's pages from disk and parses them into Page models.

    Each file is read once, whole, per run. Missing or unreadable files are
    returned as None so the checks for that page can be skipped instead of crashing.
    """

    def __init__(self, root: Path):
        self.root = root

    def read_text(self, filename: str) -> Optional[str]:
        """Returns the decoded file contents, or None when the file is absent or unreadable."""
        path = self.root / filename
        if not path.is_file():
            logger.debug("File not found: %s", path)
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            return None

    def load(self, filename: str) -> Optional[Page]:
        """Loads and parses a single page."""
        raw = self.read_text(filename)
        if raw is None:
            return None

        # Strip a leading BOM, html.parser keeps it as text otherwise
        clean_html = raw.replace('\ufeff', '')
        soup = BeautifulSoup(clean_html, 'html.parser')
        logger.debug("Parsed %s (%d chars)", filename, len(clean_html))

        return Page(name=filename, path=self.root / filename, raw=clean_html, soup=soup)

    def load_all(self, filenames: List[str]) -> Dict[str, Optional[Page]]:
        """Loads every page in order. Absent pages map to None."""
        return {name: self.load(name) for name in filenames}
