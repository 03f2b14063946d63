from pathlib import Path

import pytest

from transmailifier.errors import CommitError, ReadError
from transmailifier.persistence import SqlProcessedStore, compute_fingerprint

from tests.helpers.db import bootstrap_sqlite_db, stored_fingerprints
from tests.helpers.factories import make_ledger, make_tx


def test_fingerprint_ignores_category_but_not_profile():
    a = make_tx(1, category="Groceries")
    b = make_tx(1, category=None)

    assert compute_fingerprint(a, profile="generic") == compute_fingerprint(b, profile="generic")
    assert compute_fingerprint(a, profile="generic") == compute_fingerprint(a, profile=" GENERIC ")
    assert compute_fingerprint(a, profile="generic") != compute_fingerprint(a, profile="erste")


def test_fingerprint_distinguishes_state_and_amount():
    base = make_tx(1)
    assert compute_fingerprint(base, profile="p") != compute_fingerprint(
        make_tx(1, state="99.00"), profile="p"
    )
    assert compute_fingerprint(base, profile="p") != compute_fingerprint(
        make_tx(1, amount="-10.01"), profile="p"
    )


def test_mark_then_apply_flags_round_trip(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    store = SqlProcessedStore(profile="generic", database_url=url)
    first, second = make_tx(1, payee="A"), make_tx(2, payee="B")

    assert store.mark_processed([first]) == 1

    ledger = store.apply_processed_flags(make_ledger(first, second))
    assert [tx.processed for tx in ledger] == [True, False]
    assert stored_fingerprints(url) == {compute_fingerprint(first, profile="generic")}


def test_mark_processed_is_idempotent_and_dedupes(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    store = SqlProcessedStore(profile="generic", database_url=url)
    tx = make_tx(1)

    assert store.mark_processed([tx, tx]) == 2
    assert store.mark_processed([tx]) == 1
    assert len(stored_fingerprints(url)) == 1


def test_mark_processed_empty_is_noop_without_database():
    store = SqlProcessedStore(profile="generic", database_url=None)
    assert store.mark_processed([]) == 0


def test_profiles_do_not_share_flags(tmp_path: Path):
    url = bootstrap_sqlite_db(tmp_path / "tm.db")
    tx = make_tx(1)
    SqlProcessedStore(profile="generic", database_url=url).mark_processed([tx])

    ledger = SqlProcessedStore(profile="erste", database_url=url).apply_processed_flags(
        make_ledger(tx)
    )

    assert ledger[0].processed is False


def test_missing_database_url_raises_commit_error():
    store = SqlProcessedStore(profile="generic", database_url=None)
    with pytest.raises(CommitError, match="DATABASE_URL is not set"):
        store.mark_processed([make_tx(1)])


def test_missing_table_raises_commit_error(tmp_path: Path):
    url = f"sqlite+pysqlite:///{tmp_path / 'empty.db'}"
    store = SqlProcessedStore(profile="generic", database_url=url)
    with pytest.raises(CommitError):
        store.mark_processed([make_tx(1)])


def test_lookup_failure_is_read_error(tmp_path: Path):
    url = f"sqlite+pysqlite:///{tmp_path / 'empty.db'}"
    store = SqlProcessedStore(profile="generic", database_url=url)
    with pytest.raises(ReadError, match="Unable to load processed flags"):
        store.apply_processed_flags(make_ledger(make_tx(1)))
