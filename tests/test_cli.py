from pathlib import Path

from typer.testing import CliRunner

from transmailifier.cli import app, cmd_process
from transmailifier.ingest import load_ledger_file
from transmailifier.persistence import SqlProcessedStore

from tests.helpers.db import bootstrap_sqlite_db, stored_fingerprints
from tests.helpers.style_stub import ScriptedStyle

runner = CliRunner()

LEDGER = (
    "Date,Amount,Balance,Category,Payee,Note\n"
    "2024-05-01,-8.20,991.80,Coffee,Cafe Bar,\n"
    "2024-05-02,-45.00,946.80,,Tisak,magazines\n"
)


def _ledger_file(tmp_path: Path) -> Path:
    p = tmp_path / "ledger.csv"
    p.write_text(LEDGER, encoding="utf-8")
    return p


def test_unknown_profile_exits_with_error(tmp_path: Path):
    result = runner.invoke(app, ["process", "nope", str(_ledger_file(tmp_path))])

    assert result.exit_code == 1
    assert "Error: Unknown profile 'nope'" in result.output


def test_missing_file_exits_with_error(tmp_path: Path):
    result = runner.invoke(app, ["process", "generic", str(tmp_path / "missing.csv")])

    assert result.exit_code == 1
    assert "Error: File not found" in result.output


def test_display_limit_must_be_positive(tmp_path: Path):
    result = runner.invoke(
        app, ["process", "generic", str(_ledger_file(tmp_path)), "--display-limit", "0"]
    )

    assert result.exit_code == 2


def test_already_processed_ledger_needs_no_confirmation(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    path = _ledger_file(tmp_path)
    SqlProcessedStore(profile="generic", database_url=url).mark_processed(
        list(load_ledger_file(path, "generic"))
    )

    result = runner.invoke(app, ["process", "generic", str(path), "--database-url", url])

    assert result.exit_code == 0
    assert "All the transactions have already been processed." in result.output


def test_cmd_process_commits_after_both_confirmations(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    style = ScriptedStyle([True, True])

    code = cmd_process("generic", str(_ledger_file(tmp_path)), database_url=url, style=style)

    assert code == 0
    assert style.messages("success") == ["Successfully processed 2 new transactions."]
    assert len(stored_fingerprints(url)) == 2


def test_cmd_process_decline_returns_zero_and_stores_nothing(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    style = ScriptedStyle([False])

    code = cmd_process("generic", str(_ledger_file(tmp_path)), database_url=url, style=style)

    assert code == 0
    assert style.prompts == ["Proceed with 1 uncategorized transactions?"]
    assert stored_fingerprints(url) == set()


def test_cmd_process_uses_database_url_from_env(tmp_path: Path, monkeypatch):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    monkeypatch.setenv("DATABASE_URL", url)

    code = cmd_process("generic", str(_ledger_file(tmp_path)), style=ScriptedStyle([True, True]))

    assert code == 0
    assert len(stored_fingerprints(url)) == 2


def test_cmd_process_store_failure_returns_one(tmp_path: Path, capsys):
    # The file exists but holds no schema, so the lookup itself fails.
    url = f"sqlite+pysqlite:///{tmp_path / 'empty.db'}"
    path = _ledger_file(tmp_path)

    code = cmd_process("generic", str(path), database_url=url, style=ScriptedStyle())

    assert code == 1
    assert "Error: Unable to load processed flags" in capsys.readouterr().err


def test_cmd_process_with_only_decimal_point_configured(tmp_path: Path, monkeypatch):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    monkeypatch.setenv("TM_DECIMAL_SEPARATOR", ".")
    style = ScriptedStyle([True, True])

    code = cmd_process("generic", str(_ledger_file(tmp_path)), database_url=url, style=style)

    assert code == 0
    assert style.messages("success") == ["Successfully processed 2 new transactions."]


def test_cmd_process_reads_dotenv_from_working_directory(tmp_path: Path, monkeypatch):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    (tmp_path / ".env").write_text(f"DATABASE_URL={url}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # Registered so the value loaded from .env is removed again after the test.
    monkeypatch.setenv("DATABASE_URL", "unused")
    monkeypatch.delenv("DATABASE_URL")

    code = cmd_process("generic", str(_ledger_file(tmp_path)), style=ScriptedStyle([True, True]))

    assert code == 0
    assert len(stored_fingerprints(url)) == 2
