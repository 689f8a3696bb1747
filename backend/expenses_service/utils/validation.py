from __future__ import annotations
"""Expense payload validation.

``validate_expense`` is a pure function: it inspects a (partial or complete) payload and reports
the first failing rule. Required-field checks run first and in a fixed order, so callers always
see the message for the earliest missing field; enumeration and format checks follow.
"""
import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, NamedTuple, Optional
from expenses_service.constants.expenses import EXPENSE_CATEGORIES, PAYMENT_STATUSES, PAYMENT_METHODS
from expenses_service.errors import ValidationError

UUID_RE = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}', re.IGNORECASE)
# amounts are stored as NUMERIC(12, 2)
AMOUNT_MAX = Decimal('9999999999.99')
CENT = Decimal('0.01')


class ExpenseValidation(NamedTuple):
    is_valid: bool
    message: Optional[str] = None
    status: Optional[int] = None


VALID = ExpenseValidation(True)


def _invalid(message: str) -> ExpenseValidation:
    return ExpenseValidation(False, message, 400)


def coerce_amount(value: Any) -> Optional[Decimal]:
    """Return the amount as Decimal, or None when it is not a number."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def amount_fits(amount: Decimal) -> bool:
    """Positive, at most two decimal places and within the stored precision."""
    return CENT <= amount <= AMOUNT_MAX and amount == amount.quantize(CENT)


def parse_date(value: Any) -> Optional[dt.date]:
    """Accept a bare ISO date or a full ISO datetime (``T`` or space separated, ``Z`` allowed)."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None
    try:
        if len(value) == 10:
            return dt.date.fromisoformat(value)
        if len(value) < 16 or value[10] not in ('T', ' '):
            return None
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        return dt.datetime.fromisoformat(value).date()
    except ValueError:
        return None


def validate_expense(expense: Mapping[str, Any]) -> ExpenseValidation:
    if not expense.get('date'):
        return _invalid('Expense date is required')
    amount = coerce_amount(expense.get('amount'))
    if amount is None or not amount_fits(amount):
        return _invalid('Amount must be a positive number')
    if not expense.get('category'):
        return _invalid('Category is required')
    if not expense.get('description'):
        return _invalid('Description is required')
    employee_id = expense.get('employee_id')
    if not employee_id:
        return _invalid('Employee ID is required')
    if not isinstance(employee_id, str) or not UUID_RE.fullmatch(employee_id):
        return _invalid('Invalid employee ID format')

    if parse_date(expense['date']) is None:
        return _invalid('Invalid expense date format')
    if expense['category'] not in EXPENSE_CATEGORIES:
        return _invalid('Invalid category')
    # a payment_status key that is present must name a status; create drops empty ones first
    if 'payment_status' in expense and expense['payment_status'] not in PAYMENT_STATUSES:
        return _invalid('Invalid payment status')
    method = expense.get('payment_method')
    if method and method not in PAYMENT_METHODS:
        return _invalid('Invalid payment method')
    return VALID


def assert_valid_expense(expense: Mapping[str, Any]) -> None:
    """Raise ValidationError carrying the first failure reason, if any."""
    result = validate_expense(expense)
    if not result.is_valid:
        raise ValidationError(result.message)


__all__ = [
    'ExpenseValidation', 'validate_expense', 'assert_valid_expense', 'coerce_amount', 'amount_fits', 'parse_date',
    'UUID_RE', 'AMOUNT_MAX',
]
