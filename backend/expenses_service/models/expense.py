from __future__ import annotations
import uuid
import datetime as dt
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Numeric, Date, DateTime, ForeignKey, CheckConstraint, func
from expenses_service.constants.expenses import (
    PAYMENT_STATUS_PENDING, PAYMENT_STATUS_COMPLETED, PAYMENT_STATUSES, PAYMENT_METHODS, EXPENSE_CATEGORIES,
)
from .base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Expense(Base):
    __tablename__ = 'expenses'
    # payment_status: pending | completed | failed | refunded (completed rows cannot be deleted)
    STATUS_PENDING = PAYMENT_STATUS_PENDING
    STATUS_COMPLETED = PAYMENT_STATUS_COMPLETED
    ALL_STATUSES = PAYMENT_STATUSES
    ALL_METHODS = PAYMENT_METHODS
    ALL_CATEGORIES = EXPENSE_CATEGORIES
    # Columns a client may set on create/update; id and created_at are server-owned.
    WRITABLE_FIELDS = (
        'date', 'amount', 'category', 'description', 'payment_status',
        'payment_method', 'invoice_number', 'notes', 'employee_id',
    )
    __table_args__ = (CheckConstraint('amount > 0', name='ck_expenses_amount_positive'),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    payment_status: Mapped[str] = mapped_column(String(32), nullable=False, default=STATUS_PENDING, index=True)
    payment_method: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    invoice_number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    employee_id: Mapped[str] = mapped_column(ForeignKey('employees.id'), nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

__all__ = ["Expense"]
