from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import SQLAlchemyError
from expenses_service.constants.expenses import EXPENSE_CATEGORIES, PAYMENT_STATUS_COMPLETED, PAYMENT_STATUS_PENDING
from expenses_service.errors import BusinessRuleViolation, NotFoundError, UnexpectedError
from expenses_service.models.expense import Expense
from expenses_service.services.expense_store import ExpenseStore
from expenses_service.services.ledger import LedgerWriter, should_record_transaction
from expenses_service.utils.validation import assert_valid_expense

logger = logging.getLogger(__name__)


def expense_json(e: Expense) -> Dict[str, Any]:
    return {
        'id': e.id,
        'date': e.date.isoformat() if e.date else None,
        'amount': float(e.amount) if e.amount is not None else None,
        'category': e.category,
        'description': e.description,
        'payment_status': e.payment_status,
        'payment_method': e.payment_method,
        'invoice_number': e.invoice_number,
        'notes': e.notes,
        'employee_id': e.employee_id,
        'created_at': e.created_at.isoformat().replace('+00:00', 'Z') if e.created_at else None,
    }


def store_boundary(action: str):
    """Translate store failures into UnexpectedError after rolling back the session."""
    def outer(fn):
        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                self.store.rollback()
                logger.exception('Error %s', action)
                raise UnexpectedError.from_exception(exc) from exc
        return wrapper
    return outer


class ExpenseService:
    """Expense operations: validation, persistence, employee decoration and the ledger side effect."""

    def __init__(self, store: Optional[ExpenseStore] = None, ledger: Optional[LedgerWriter] = None):
        self.store = store or ExpenseStore()
        self.ledger = ledger or LedgerWriter(self.store)

    def categories(self) -> List[str]:
        return list(EXPENSE_CATEGORIES)

    @store_boundary('fetching expenses')
    def list_expenses(self, filters: Mapping[str, Any]) -> List[Dict[str, Any]]:
        expenses = [expense_json(e) for e in self.store.query_expenses(filters)]
        if not expenses:
            return []
        employee_ids = sorted({e['employee_id'] for e in expenses if e['employee_id']})
        if not employee_ids:
            return expenses
        try:
            employees = self.store.employees_by_ids(employee_ids)
        except SQLAlchemyError:
            # Degrade to bare expenses rather than failing the listing.
            self.store.rollback()
            logger.warning('Error fetching employee data for %d expenses', len(expenses), exc_info=True)
            return expenses
        for e in expenses:
            e['employee'] = employees.get(e['employee_id']) if e['employee_id'] else None
        return expenses

    def _with_employee(self, expense: Expense) -> Dict[str, Any]:
        # Single-row lookup: a missing employee raises and is reported as an error.
        employee = self.store.get_employee(expense.employee_id)
        body = expense_json(expense)
        body['employee'] = {'id': employee.id, 'name': employee.name}
        return body

    def _require_expense(self, expense_id: str) -> Expense:
        expense = self.store.find_expense(expense_id)
        if expense is None:
            raise NotFoundError('Expense')
        return expense

    @store_boundary('fetching expense')
    def get_expense(self, expense_id: str) -> Dict[str, Any]:
        return self._with_employee(self._require_expense(expense_id))

    @store_boundary('creating expense')
    def create_expense(self, payload: Mapping[str, Any], user_id: str) -> Dict[str, Any]:
        """Create an expense; a completed one is booked to the ledger under ``user_id``, the caller."""
        data = dict(payload)
        if not data.get('payment_status'):
            data['payment_status'] = PAYMENT_STATUS_PENDING
        assert_valid_expense(data)
        created = self._with_employee(self.store.insert_expense(data))
        if should_record_transaction(None, created['payment_status']):
            self.ledger.record_expense_payment(created, user_id)
        return created

    @store_boundary('updating expense')
    def update_expense(self, expense_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        assert_valid_expense(payload)
        existing = self._require_expense(expense_id)
        previous_status = existing.payment_status
        previous_employee_id = existing.employee_id
        updated = self._with_employee(self.store.update_expense(existing, payload))
        if should_record_transaction(previous_status, payload.get('payment_status')):
            self.ledger.record_expense_payment(updated, previous_employee_id)
        return updated

    @store_boundary('deleting expense')
    def delete_expense(self, expense_id: str) -> None:
        existing = self._require_expense(expense_id)
        if existing.payment_status == PAYMENT_STATUS_COMPLETED:
            raise BusinessRuleViolation('Cannot delete an expense with completed payment')
        self.store.delete_expense(existing)


__all__ = ['ExpenseService', 'expense_json', 'store_boundary']
