#!/usr/bin/env python
"""Idempotent seed script for employees referenced by expenses.

Usage:
    python backend/scripts/seed_employees.py            # seed normally
    python backend/scripts/seed_employees.py --dry-run  # run logic then rollback (no DB changes)
    python backend/scripts/seed_employees.py --list     # print employees after seeding
"""
from __future__ import annotations
import os, sys, argparse
from sqlalchemy import select, text

# Allow running from repo root
sys.path.append(os.path.abspath('backend'))

from expenses_service import create_app, get_db  # type: ignore
from expenses_service.models import Base, Employee
from seeds.employees import EMPLOYEES


def ensure_employees(session, rows):
    existing = {e.id for e in session.execute(select(Employee)).scalars().all()}
    created = 0
    for row in rows:
        if row['id'] not in existing:
            session.add(Employee(id=row['id'], name=row['name'], email=row.get('email')))
            created += 1
    return created


def print_employees(session):
    rows = session.execute(select(Employee).order_by(Employee.name)).scalars().all()
    if not rows:
        print("[INFO] No employees present.")
        return
    for e in rows:
        print(f"{e.id} | {e.name}")


def parse_args():
    p = argparse.ArgumentParser(description="Seed development employees")
    p.add_argument('--dry-run', action='store_true', help='Rollback after operations (no commit)')
    p.add_argument('--list', action='store_true', help='Print employees after seeding')
    return p.parse_args()


def main():
    args = parse_args()
    app = create_app()
    with app.app_context():
        session = get_db()
        try:
            session.execute(text('SELECT 1 FROM employees LIMIT 1'))
        except Exception:
            # Auto-create schema for bootstrap; in real env prefer alembic upgrade
            session.rollback()
            Base.metadata.create_all(session.get_bind())
        created = ensure_employees(session, EMPLOYEES)
        if args.dry_run:
            session.rollback()
            print(f"[DRY-RUN] (rolled back) Employees would create: {created}")
        else:
            session.commit()
            print(f"[DONE] Employees created: {created}")
        if args.list:
            print_employees(session)


if __name__ == '__main__':
    main()
