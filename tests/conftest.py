# tests/conftest.py
from pathlib import Path

import pytest

from siteaudit.controllers.audit_controller import AuditController
from siteaudit.model import SiteConfig
from site_factory import write_site


@pytest.fixture
def site_root(tmp_path) -> Path:
    """A fully valid three-page site."""
    return write_site(tmp_path)


@pytest.fixture
def site_config(site_root) -> SiteConfig:
    return SiteConfig(root=site_root)


@pytest.fixture
def run_site():
    """Runs the full battery against a root directory and returns the Report."""
    def _run(root: Path):
        return AuditController(SiteConfig(root=root)).run_audit()
    return _run
