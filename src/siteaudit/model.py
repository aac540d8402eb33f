from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Page(BaseModel):
    """
    A single static document loaded from the site root.
    Holds both the raw text (for textual checks like the doctype) and the parsed tree.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str  # e.g. 'index.html'
    path: Path
    raw: str
    soup: BeautifulSoup

    @property
    def title_text(self) -> str:
        title = self.soup.find('title')
        return title.get_text(strip=True) if title else ""


class CheckResult(BaseModel):
    """
    Outcome of one check.
    'page' is None for site-wide checks (file existence, stylesheet).
    """
    model_config = ConfigDict(frozen=True)

    name: str
    passed: bool
    message: str = ""
    suite: str = ""
    page: Optional[str] = None

    def as_row(self) -> Dict[str, Any]:
        return {
            "Suite": self.suite,
            "Page": self.page or "",
            "Check": self.name,
            "Passed": self.passed,
            "Message": self.message,
        }


class Report(BaseModel):
    """
    Aggregated outcome of one validation run.

    The report is a value: record() and extend() return a new Report instead of
    mutating counters, so every suite can be evaluated and tested on its own.
    """
    model_config = ConfigDict(frozen=True)

    passed: int = 0
    failed: int = 0
    failures: Tuple[CheckResult, ...] = ()
    results: Tuple[CheckResult, ...] = ()

    def record(self, result: CheckResult) -> "Report":
        if result.passed:
            return self.model_copy(update={
                "passed": self.passed + 1,
                "results": self.results + (result,),
            })
        return self.model_copy(update={
            "failed": self.failed + 1,
            "failures": self.failures + (result,),
            "results": self.results + (result,),
        })

    def extend(self, results: List[CheckResult]) -> "Report":
        report = self
        for result in results:
            report = report.record(result)
        return report

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class FormField(BaseModel):
    """A named control the contact form must expose."""
    label: str  # e.g. 'Name field'
    tag: str = "input"
    name: str
    type: Optional[str] = None  # expected input type, e.g. 'email'


class SiteConfig(BaseModel):
    """
    Validated description of the site under test.
    Defaults describe the three-page marketing site; settings.json and CLI flags override them.
    """
    name: str = "TechForward Consulting"
    root: Path = Field(default_factory=Path.cwd)
    pages: List[str] = Field(default_factory=lambda: ["index.html", "about.html", "contact.html"])
    stylesheet: str = "styles.css"
    nav_links: List[str] = Field(default_factory=lambda: ["index.html", "about.html", "contact.html"])
    nav_link_class: str = "nav__link"
    active_class: str = "active"
    required_meta: List[str] = Field(default_factory=lambda: ["charset", "viewport"])
    form_page: str = "contact.html"
    form_fields: List[FormField] = Field(default_factory=lambda: [
        FormField(label="Name field", name="name"),
        FormField(label="Email field", name="email", type="email"),
        FormField(label="Subject field", name="subject"),
        FormField(label="Message field", tag="textarea", name="message"),
    ])
    min_form_labels: int = 4

    @field_validator('root', mode='before')
    @classmethod
    def expand_root(cls, v: Any) -> Path:
        """Accepts strings from settings.json and resolves '~' and relative paths."""
        if v is None or v == "":
            return Path.cwd()
        return Path(v).expanduser().resolve()

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]], **overrides: Any) -> "SiteConfig":
        """
        Builds a config from the 'site' section of settings.json.
        Overrides with a value of None are ignored so unset CLI flags keep the file defaults.
        """
        data = dict(settings or {})
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)

    @property
    def stylesheet_path(self) -> Path:
        return self.root / self.stylesheet
