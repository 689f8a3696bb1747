"""Enumerations shared by the expense model, validator and routes.

Order matters for EXPENSE_CATEGORIES: it is returned verbatim by the categories endpoint.
"""
from __future__ import annotations

EXPENSE_CATEGORIES = (
    'utilities',
    'rent',
    'salaries',
    'maintenance',
    'supplies',
    'taxes',
    'insurance',
    'other',
)

PAYMENT_STATUS_PENDING = 'pending'
PAYMENT_STATUS_COMPLETED = 'completed'
PAYMENT_STATUS_FAILED = 'failed'
PAYMENT_STATUS_REFUNDED = 'refunded'
PAYMENT_STATUSES = (PAYMENT_STATUS_PENDING, PAYMENT_STATUS_COMPLETED, PAYMENT_STATUS_FAILED, PAYMENT_STATUS_REFUNDED)

PAYMENT_METHOD_CASH = 'cash'
PAYMENT_METHODS = (PAYMENT_METHOD_CASH, 'card', 'bank_transfer', 'mobile_payment')

__all__ = [
    'EXPENSE_CATEGORIES', 'PAYMENT_STATUS_PENDING', 'PAYMENT_STATUS_COMPLETED', 'PAYMENT_STATUS_FAILED',
    'PAYMENT_STATUS_REFUNDED', 'PAYMENT_STATUSES', 'PAYMENT_METHOD_CASH', 'PAYMENT_METHODS',
]
