import os, sys, pytest
# Ensure the backend directory is on path so 'expenses_service' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from sqlalchemy import delete
from expenses_service import create_app, get_db
from expenses_service.models import Base, Expense, Transaction

@pytest.fixture(scope='session', autouse=True)
def app_instance():
    os.environ['DATABASE_URL'] = 'sqlite+pysqlite:///:memory:'
    app = create_app({'JWT_SECRET_KEY': 'test-secret'})
    with app.app_context():
        engine = get_db().get_bind()
        Base.metadata.create_all(engine)
    yield app

@pytest.fixture(autouse=True)
def clean_ledger(app_instance):
    # Expenses and transactions are rebuilt per test; employees persist for the session.
    yield
    session = get_db()
    session.rollback()
    session.execute(delete(Transaction))
    session.execute(delete(Expense))
    session.commit()

@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()

@pytest.fixture()
def auth_headers(app_instance):
    from tests.test_utils_seed import bearer_headers
    with app_instance.app_context():
        return bearer_headers('user-1')
