import os
from datetime import timedelta
from dotenv import load_dotenv

# .env betöltése
load_dotenv()

DEFAULT_SECRET_KEY = 'change-this-in-production'


class Config:
    # --- Flask session / security ---
    SECRET_KEY = os.environ.get('SESSION_SECRET', DEFAULT_SECRET_KEY)
    PORT = int(os.environ.get('PORT', 4156))

    # --- Útvonal előtag (pl. "/app156"), üres = gyökér ---
    BASE_PATH = os.environ.get('BASE_PATH', '')

    # --- SQLAlchemy ---
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///tanosveny.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Jelszó hash ---
    BCRYPT_LOG_ROUNDS = 10

    # --- Session: 2 óra, aktivitás nem hosszabbítja ---
    PERMANENT_SESSION_LIFETIME = timedelta(hours=2)
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    # --- Nyelv ---
    BABEL_DEFAULT_LOCALE = 'hu'
    BABEL_DEFAULT_TIMEZONE = 'UTC'
    LANGUAGES = ["hu"]

    # --- Első indításkor létrehozott admin ---
    ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Admin')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@local')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'Admin123!')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_LOG_ROUNDS = 4
    BASE_PATH = ''
    ADMIN_NAME = 'Admin'
    ADMIN_EMAIL = 'admin@local'
    ADMIN_PASSWORD = 'Admin123!'
