# src/siteaudit/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving package paths and export targets.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed 'siteaudit' package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        """Returns the packaged defaults file (siteaudit/settings.json)."""
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def resolve_output_path(path: str) -> Path:
        """
        Relative export paths are resolved against the current working directory.
        Creates the parent directory; raises OSError when that is not possible.
        """
        output = Path(path).expanduser()
        if not output.is_absolute():
            output = Path.cwd() / output
        output.parent.mkdir(parents=True, exist_ok=True)
        return output
