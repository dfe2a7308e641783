# routes/register/views.py
from flask import request, render_template, redirect, url_for, current_app
from sqlalchemy.exc import IntegrityError
from . import register_bp
from models import Role, User
from extensions import db
from errors import ValidationError
from security import hash_password

DUPLICATE_EMAIL = "Már van ilyen emaillel fiók."


@register_bp.route('/register', endpoint='register', methods=['GET'])
def register():
    return render_template('auth/register.html', title='Regisztráció – Tanösvény')


@register_bp.route('/register', endpoint='register_create', methods=['POST'])
def register_create():
    name = request.form.get('name')
    email = request.form.get('email')
    password = request.form.get('password')

    if not name or not email or not password:
        raise ValidationError("Hiányzó adatok.")

    if User.query.filter_by(email=email).first():
        raise ValidationError(DUPLICATE_EMAIL)

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=Role.REGISTERED,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # párhuzamos regisztráció ugyanazzal az emaillel
        db.session.rollback()
        raise ValidationError(DUPLICATE_EMAIL)

    current_app.logger.info("Új felhasználó regisztrált: %s", email)
    return redirect(url_for('login.login'))
