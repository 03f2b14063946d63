from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import CHAR, BigInteger, Date, DateTime, Integer, Numeric, String, Text, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


# ---------------------------
# Core: tm_processed_transactions
# ---------------------------


class TmProcessedTransaction(Base):
    """One ledger line that has been processed.

    Presence of a row is the processed flag; rows are never updated or
    deleted by the application. ``tx_date``/``amount``/``payee`` are kept
    only to make the table readable when inspected by hand.
    """

    __tablename__ = "tm_processed_transactions"

    # BigInteger on Postgres, plain INTEGER rowid on SQLite so autoincrement works.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    fingerprint_sha256: Mapped[str] = mapped_column(CHAR(64), nullable=False, unique=True)
    profile: Mapped[str] = mapped_column(String, nullable=False)
    tx_date: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    payee: Mapped[str | None] = mapped_column(Text, nullable=True)
    processed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")
    )
