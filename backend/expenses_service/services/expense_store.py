from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional
from sqlalchemy import select
from expenses_service import get_db
from expenses_service.models.employee import Employee
from expenses_service.models.expense import Expense
from expenses_service.models.transaction import Transaction
from expenses_service.utils.filters import apply_filters
from expenses_service.utils.validation import parse_date, coerce_amount

EXPENSE_FILTERS = {
    'category': {'op': lambda q, v: q.where(Expense.category == v)},
    'start_date': {'coerce': parse_date, 'op': lambda q, v: q.where(Expense.date >= v)},
    'end_date': {'coerce': parse_date, 'op': lambda q, v: q.where(Expense.date <= v)},
    'payment_status': {'op': lambda q, v: q.where(Expense.payment_status == v)},
}


def _column_values(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Project a client payload onto writable columns, converting date and amount."""
    values = {k: payload[k] for k in Expense.WRITABLE_FIELDS if k in payload}
    if 'date' in values:
        values['date'] = parse_date(values['date'])
    if 'amount' in values:
        values['amount'] = coerce_amount(values['amount'])
    # no method is NULL, never ''
    if 'payment_method' in values and not values['payment_method']:
        values['payment_method'] = None
    return values


class ExpenseStore:
    """Thin data access layer over the expenses, employees and transactions tables.

    Methods raise SQLAlchemy errors unchanged; translating them is the caller's job.
    Point lookups come in two flavours: ``find_*`` returns None when absent, ``get_*``
    raises ``NoResultFound`` (single-row-or-error).
    """

    def __init__(self, session=None):
        self.session = session if session is not None else get_db()

    # --- expenses ---
    def query_expenses(self, filters: Mapping[str, Any]) -> List[Expense]:
        q = select(Expense)
        q = apply_filters(q, EXPENSE_FILTERS, filters)
        q = q.order_by(Expense.date.desc(), Expense.created_at.desc())
        return list(self.session.execute(q).scalars())

    def find_expense(self, expense_id: str) -> Optional[Expense]:
        return self.session.execute(select(Expense).where(Expense.id == expense_id)).scalar_one_or_none()

    def insert_expense(self, payload: Mapping[str, Any]) -> Expense:
        expense = Expense(**_column_values(payload))
        self.session.add(expense)
        self.session.commit()
        self.session.refresh(expense)
        return expense

    def update_expense(self, expense: Expense, payload: Mapping[str, Any]) -> Expense:
        for key, value in _column_values(payload).items():
            setattr(expense, key, value)
        self.session.commit()
        self.session.refresh(expense)
        return expense

    def delete_expense(self, expense: Expense) -> None:
        self.session.delete(expense)
        self.session.commit()

    # --- employees ---
    def get_employee(self, employee_id: str) -> Employee:
        return self.session.execute(select(Employee).where(Employee.id == employee_id)).scalar_one()

    def employees_by_ids(self, employee_ids: Iterable[str]) -> Dict[str, Dict[str, str]]:
        ids = list(employee_ids)
        if not ids:
            return {}
        rows = self.session.execute(select(Employee.id, Employee.name).where(Employee.id.in_(ids))).all()
        return {row.id: {'id': row.id, 'name': row.name} for row in rows}

    # --- transactions ---
    def insert_transaction(self, values: Mapping[str, Any]) -> Transaction:
        tx = Transaction(**values)
        self.session.add(tx)
        self.session.commit()
        return tx

    def rollback(self) -> None:
        self.session.rollback()


__all__ = ['ExpenseStore', 'EXPENSE_FILTERS']
