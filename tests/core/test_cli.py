# tests/core/test_cli.py
import json

import pandas as pd
import pytest

from siteaudit.cli import main
from site_factory import render_page, write_site


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Runs must not depend on anything in the user's home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


def test_valid_site_exits_zero(site_root, capsys):
    exit_code = main(["--root", str(site_root)])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "TechForward Consulting - Test Suite" in out
    assert "📁 File Existence Tests" in out
    assert "  [about.html]" in out
    assert "  ✓ Has DOCTYPE" in out
    assert "Results: 79 passed, 0 failed" in out
    assert "✅ All tests passed!" in out


def test_failures_are_itemised_and_exit_one(tmp_path, capsys):
    write_site(tmp_path, pages={"index.html": render_page("index.html", extra='<img src="x.png">')})

    exit_code = main(["--root", str(tmp_path)])
    out = capsys.readouterr().out

    assert exit_code == 1
    assert "  ✗ All images have alt attributes" in out
    assert "    → 1 images missing alt" in out
    assert "Results: 78 passed, 1 failed" in out
    assert "❌ Some tests failed:" in out
    assert "  • All images have alt attributes (index.html)" in out


def test_defaults_to_current_directory(site_root, monkeypatch, capsys):
    monkeypatch.chdir(site_root)
    assert main([]) == 0


def test_export_csv(site_root, tmp_path, capsys):
    output = tmp_path / "out" / "results.csv"
    main(["--root", str(site_root), "--export", str(output)])

    assert "Results exported to" in capsys.readouterr().out
    df = pd.read_csv(output)
    assert list(df.columns) == ["Suite", "Page", "Check", "Passed", "Message"]
    assert len(df) == 79
    assert df["Passed"].all()


def test_unknown_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2


def test_settings_in_home_directory_are_ignored(site_root, isolated_home, capsys):
    user_dir = isolated_home / ".siteaudit"
    user_dir.mkdir()
    (user_dir / "settings.json").write_text(
        json.dumps({"site": {"pages": ["index.html"], "min_form_labels": 9}}), encoding="utf-8"
    )

    exit_code = main(["--root", str(site_root)])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Results: 79 passed, 0 failed" in out


def test_export_failure_is_logged_and_keeps_exit_code(site_root, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    exit_code = main(["--root", str(site_root), "--export", str(blocker / "out.csv")])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Results exported to" not in out
    assert not (blocker / "out.csv").exists()


def test_export_failure_does_not_mask_failed_checks(tmp_path, capsys):
    site = tmp_path / "site"
    site.mkdir()
    write_site(site, pages={"index.html": render_page("index.html", extra='<img src="x.png">')})
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    assert main(["--root", str(site), "--export", str(blocker / "out.xlsx")]) == 1


def test_list_checks(capsys):
    assert main(["--list-checks"]) == 0
    out = capsys.readouterr().out

    assert "📝 Contact Form Tests  [form, form]" in out
    assert '  - {field} has type="{type}"' in out
    assert "  - Only current page is marked active" in out
    # Suites are listed in run order
    assert out.index("File Existence Tests") < out.index("CSS Tests")
