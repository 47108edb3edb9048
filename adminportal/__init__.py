import os
from datetime import timedelta

from flask import Flask, current_app, redirect, url_for

# Extensions & Models (import early for init)
from adminportal.config import DEFAULT_VERIFIER, LOGIN_ROUTE, SESSION_LIFETIME_MS
from adminportal.credentials import get_verifier
from adminportal.extensions import db, login_manager
from adminportal.models import AdminSessionUser

# Blueprints
from adminportal.modules.auth.routes import auth_bp
from adminportal.modules.dashboard.gate import SessionGate
from adminportal.modules.dashboard.routes import dashboard_bp
from adminportal import services


def create_app(test_config=None):
    app = Flask(__name__)

    # --- CONFIG FROM .ENV ---
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY')

    # Database Config
    db_path = os.path.join(app.instance_path, 'db.sqlite')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL') or f'sqlite:///{db_path}'

    app.config['CREDENTIAL_VERIFIER'] = os.getenv('CREDENTIAL_VERIFIER', DEFAULT_VERIFIER)

    # The session cookie stands in for browser local storage
    app.config['PERMANENT_SESSION_LIFETIME'] = timedelta(milliseconds=SESSION_LIFETIME_MS)

    if test_config:
        app.config.update(test_config)

    if not app.config['SECRET_KEY']:
        raise ValueError("❌ SECRET_KEY must be set in .env!")
    # Fail at startup, not on the first login
    get_verifier(app.config['CREDENTIAL_VERIFIER'])

    # Auto-create instance folder
    os.makedirs(app.instance_path, exist_ok=True)

    # Initialize Extensions
    db.init_app(app)
    login_manager.init_app(app)

    # --- SESSION GATE ---
    @login_manager.request_loader
    def load_admin_from_session(request):
        gate = SessionGate(
            services.session_store(),
            services.navigator(),
            clock=services.clock(),
            logger=current_app.logger,
        )
        gate.check_auth()
        return AdminSessionUser(gate.session) if gate.authenticated else None

    @login_manager.unauthorized_handler
    def redirect_to_login():
        nav = services.navigator()
        if nav.pending:
            return nav.response()
        return redirect(url_for(LOGIN_ROUTE))

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)

    return app
