from __future__ import annotations
"""Ledger side effect for settled expenses.

A Transaction row is written after the expense itself has been committed, in its own commit.
Writing is best effort: failures are logged and swallowed so the expense mutation still succeeds.
There is no retry or compensation, so a failed write leaves a completed expense without a
ledger entry.
"""
import datetime as dt
import logging
from typing import Any, Dict, Mapping, Optional
from expenses_service.constants.expenses import PAYMENT_STATUS_COMPLETED, PAYMENT_METHOD_CASH
from expenses_service.models.transaction import Transaction
from expenses_service.utils.validation import coerce_amount

logger = logging.getLogger(__name__)


def should_record_transaction(previous_status: Optional[str], new_status: Optional[str]) -> bool:
    """True only on a transition into completed (previous None means a fresh create)."""
    return new_status == PAYMENT_STATUS_COMPLETED and previous_status != PAYMENT_STATUS_COMPLETED


def build_expense_transaction(expense: Mapping[str, Any], employee_id: str, now: Optional[dt.datetime] = None) -> Dict[str, Any]:
    return {
        'amount': coerce_amount(expense['amount']),
        'payment_method': expense.get('payment_method') or PAYMENT_METHOD_CASH,
        'payment_status': PAYMENT_STATUS_COMPLETED,
        'employee_id': employee_id,
        'entity_id': expense['id'],
        'entity_type': Transaction.ENTITY_EXPENSE,
        'description': f"Expense: {expense['description']} ({expense['category']})",
        'updated_at': now or dt.datetime.now(dt.timezone.utc),
    }


class LedgerWriter:
    def __init__(self, store):
        self.store = store

    def record_expense_payment(self, expense: Mapping[str, Any], employee_id: str) -> Optional[Transaction]:
        try:
            return self.store.insert_transaction(build_expense_transaction(expense, employee_id))
        except Exception:
            self.store.rollback()
            logger.exception('Error creating transaction for expense %s', expense.get('id'))
            return None


__all__ = ['LedgerWriter', 'build_expense_transaction', 'should_record_transaction']
