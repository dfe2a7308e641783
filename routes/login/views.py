# routes/login/views.py
from flask_login import login_user, logout_user, current_user
from flask import request, render_template, redirect, url_for, session, current_app
from . import login_bp
from models import User, SessionUser, LoginSession
from errors import ValidationError
from security import verify_password
from utils import safe_next_url, no_cache

INVALID_LOGIN = "Hibás bejelentkezés."


@login_bp.route('/login', endpoint='login', methods=['GET'])
@no_cache
def login():
    return render_template(
        'auth/login.html',
        title='Bejelentkezés – Tanösvény',
        next=request.args.get('next') or url_for('home.index'),
    )


@login_bp.route('/login', endpoint='login_submit', methods=['POST'])
def login_submit():
    email = request.form.get('email')
    password = request.form.get('password')
    next_url = request.form.get('next')

    user = User.query.filter_by(email=email).first() if email else None

    # ismeretlen email és rossz jelszó ugyanazt a választ kapja
    if user is None or not verify_password(password, user.password_hash):
        current_app.logger.info("Sikertelen bejelentkezés: %s", email)
        raise ValidationError(INVALID_LOGIN)

    if current_user.is_authenticated:
        LoginSession.close(current_user.get_id())
    session.clear()
    record = LoginSession.open_for_user(user, current_app.permanent_session_lifetime)
    session.permanent = True
    login_user(SessionUser.from_session(record), remember=False)

    current_app.logger.info("Bejelentkezett: %s", email)
    return redirect(safe_next_url(next_url))


@login_bp.route('/logout', endpoint='logout', methods=['POST'])
def logout():
    if current_user.is_authenticated:
        LoginSession.close(current_user.get_id())   # szerver oldali session törlése
    logout_user()        # Flask-Login session törlése
    session.clear()      # minden session változó törlése
    return redirect(url_for('home.index'))
