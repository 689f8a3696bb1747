"""Seed definitions for development employees.
(Consumed by scripts/seed_employees.py; ids are fixed so sample expenses can reference them.)
"""

EMPLOYEES = [
    {'id': '11111111-1111-1111-1111-111111111111', 'name': 'Office Manager', 'email': 'office@example.com'},
    {'id': '22222222-2222-2222-2222-222222222222', 'name': 'Facilities Lead', 'email': 'facilities@example.com'},
    {'id': '33333333-3333-3333-3333-333333333333', 'name': 'Accountant', 'email': 'accounts@example.com'},
]
