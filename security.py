# security.py
import logging
from flask import current_app
from extensions import db, bcrypt
from models import Role, User

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.generate_password_hash(password).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.check_password_hash(password_hash, password)
    except ValueError:
        # sérült / nem bcrypt hash a táblában
        logger.warning("Invalid password hash format in users table")
        return False


def seed_admin() -> bool:
    """Létrehozza az alapértelmezett admin fiókot, ha még nincs ilyen email."""
    email = current_app.config['ADMIN_EMAIL']
    if User.query.filter_by(email=email).first():
        return False

    admin = User(
        name=current_app.config['ADMIN_NAME'],
        email=email,
        password_hash=hash_password(current_app.config['ADMIN_PASSWORD']),
        role=Role.ADMIN,
    )
    db.session.add(admin)
    db.session.commit()
    logger.warning("Seeded admin user: %s (default password, change it!)", email)
    return True
