from flask import Flask, request, make_response
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()

db_engine = None
SessionLocal = None
jwt = JWTManager()


def _enable_sqlite_foreign_keys(engine):
    @event.listens_for(engine, 'connect')
    def _set_pragma(dbapi_connection, connection_record):  # type: ignore
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def create_app(config: Optional[Dict[str, Any]] = None):
    global db_engine, SessionLocal
    app = Flask(__name__)

    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'dev-secret')
    app.config['DATABASE_URL'] = os.getenv('DATABASE_URL', 'sqlite:///dev.db')
    app.config['FUNCTIONS_PREFIX'] = os.getenv('FUNCTIONS_PREFIX', '/functions/v1')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    # Database
    db_url = app.config['DATABASE_URL']
    if db_url.endswith(':memory:'):
        # Ensure a single shared in-memory SQLite database across all sessions
        db_engine = create_engine(
            db_url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(db_url, echo=False, future=True)
    if db_engine.dialect.name == 'sqlite':
        _enable_sqlite_foreign_keys(db_engine)
    SessionLocal = scoped_session(sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False))

    jwt.init_app(app)

    from .config.cors import cors_headers
    from .routes.expenses import functions_bp
    app.register_blueprint(functions_bp, url_prefix=app.config['FUNCTIONS_PREFIX'])

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    @app.before_request
    def preflight():
        # CORS preflight is answered for every path without authentication
        if request.method == 'OPTIONS':
            return make_response('ok', 200)

    @app.after_request
    def add_cors_headers(resp):
        resp.headers.update(cors_headers())
        return resp

    # Errors raised outside the functions blueprint share its {error, details?} envelope
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            return {'error': e.description or e.name}, e.code
        app.logger.exception('Unhandled exception')
        return {'error': 'Internal Server Error'}, 500

    return app


def get_db():
    return SessionLocal()
