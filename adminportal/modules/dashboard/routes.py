from datetime import datetime

from flask import Blueprint, redirect, render_template, url_for
from flask_login import current_user, login_required

from adminportal.config import DASHBOARD_ROUTE, LOGIN_ROUTE

# Define the Blueprint
dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
def index():
    if not current_user.is_authenticated:
        return redirect(url_for(LOGIN_ROUTE))
    return redirect(url_for(DASHBOARD_ROUTE))


@dashboard_bp.route('/dashboard')
@login_required
def dashboard_view():
    session = current_user.record
    return render_template(
        'main/dashboard.html',
        admin=session,
        logged_in_at=datetime.fromtimestamp(session.login_time / 1000),
    )

