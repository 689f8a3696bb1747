"""Test seeding utilities shared by the expense tests."""
import datetime as dt
from decimal import Decimal
from typing import Dict, Optional
from flask_jwt_extended import create_access_token
from sqlalchemy import select, func
from expenses_service import get_db
from expenses_service.models import Employee, Expense, Transaction

EMPLOYEE_ID = '11111111-1111-1111-1111-111111111111'
OTHER_EMPLOYEE_ID = '22222222-2222-2222-2222-222222222222'
BASE = '/functions/v1/expenses'


def bearer_headers(user_id: str) -> Dict[str, str]:
    """Must be called inside an app context."""
    token = create_access_token(identity=user_id)
    return {'Authorization': f'Bearer {token}'}


def ensure_employee(employee_id: str = EMPLOYEE_ID, name: Optional[str] = None) -> Employee:
    session = get_db()
    emp = session.get(Employee, employee_id)
    if not emp:
        emp = Employee(id=employee_id, name=name or f'Employee {employee_id[:4]}')
        session.add(emp); session.commit(); session.refresh(emp)
    return emp


def create_expense(date: str = '2024-01-01', amount='100', category: str = 'rent', description: str = 'Office rent',
                   payment_status: str = 'pending', employee_id: str = EMPLOYEE_ID, **extra) -> Expense:
    """Insert an expense row directly, bypassing the API (and therefore the ledger)."""
    ensure_employee(employee_id)
    session = get_db()
    e = Expense(date=dt.date.fromisoformat(date), amount=Decimal(str(amount)), category=category,
                description=description, payment_status=payment_status, employee_id=employee_id, **extra)
    session.add(e); session.commit(); session.refresh(e)
    return e


def expense_payload(**overrides):
    payload = {
        'date': '2024-01-01',
        'amount': 100,
        'category': 'rent',
        'description': 'Office rent',
        'employee_id': EMPLOYEE_ID,
    }
    payload.update(overrides)
    return payload


def transactions_for(expense_id: str):
    session = get_db()
    return session.execute(select(Transaction).where(Transaction.entity_id == expense_id)).scalars().all()


def transaction_count() -> int:
    return get_db().execute(select(func.count(Transaction.id))).scalar_one()


__all__ = [
    'EMPLOYEE_ID', 'OTHER_EMPLOYEE_ID', 'BASE', 'bearer_headers', 'ensure_employee', 'create_expense',
    'expense_payload', 'transactions_for', 'transaction_count',
]
