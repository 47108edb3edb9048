from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from adminportal import services
from adminportal.config import LOGIN_ROUTE, MIN_PASSWORD_LENGTH
from adminportal.errors import PortalError
from adminportal.modules.auth.matcher import AdminsState, CredentialMatcher, LoginView

auth_bp = Blueprint('auth', __name__)


def _matcher():
    return CredentialMatcher(
        services.session_store(),
        services.document_store(),
        services.navigator(),
        verifier=services.credential_verifier(),
        notify=services.notify,
        clock=services.clock(),
        logger=current_app.logger,
    )


def _render(matcher, email=''):
    if matcher.view is LoginView.CHANGE_PASSWORD_FORM:
        return render_template('auth/change_password.html',
                               admin=matcher.selected_admin,
                               min_length=MIN_PASSWORD_LENGTH)
    return render_template('auth/login.html',
                           admins=matcher.admins,
                           error=matcher.error,
                           email=email,
                           load_failed=matcher.admins_state is AdminsState.FAILED)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    matcher = _matcher()
    if matcher.mount():
        return services.navigator().response()

    email = ''
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        try:
            matcher.authenticate(email, password)
            return services.navigator().response()
        except PortalError as e:
            flash(e.message, category=e.category)
        except Exception:
            current_app.logger.exception("Login error")
            matcher.error = 'An error occurred during login'
            flash(matcher.error, category='error')

    return _render(matcher, email=email)


@auth_bp.route('/login/change-password/<admin_id>', methods=['GET', 'POST'])
def change_password(admin_id):
    matcher = _matcher()
    if matcher.mount():
        return services.navigator().response()

    try:
        matcher.open_change_password(admin_id)
    except PortalError as e:
        flash(e.message, category=e.category)
        return redirect(url_for(LOGIN_ROUTE))

    if request.method == 'POST':
        try:
            matcher.change_password(
                matcher.selected_admin,
                request.form.get('current_password', ''),
                request.form.get('new_password', ''),
                request.form.get('confirm_password', ''),
            )
            return redirect(url_for(LOGIN_ROUTE))
        except PortalError as e:
            flash(e.message, category=e.category)

    return _render(matcher)


@auth_bp.route('/login/change-password/cancel', methods=['POST'])
def cancel_change_password():
    _matcher().cancel_change_password()
    return redirect(url_for(LOGIN_ROUTE))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    sessions = services.session_store()
    stored = sessions.load()
    sessions.clear()
    if stored:
        current_app.logger.info("Logout for %s", stored[0].email)
    flash('Logged out.', category='info')
    return redirect(url_for(LOGIN_ROUTE))
