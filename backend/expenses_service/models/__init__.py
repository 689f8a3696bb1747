from .base import Base
from .employee import Employee
from .expense import Expense
from .transaction import Transaction

__all__ = ["Base", "Employee", "Expense", "Transaction"]
