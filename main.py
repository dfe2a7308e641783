# TANÖSVÉNY – túraútvonal katalógus
import logging
from flask import Flask, request, current_app, has_request_context
from flask_login import current_user
from werkzeug.exceptions import HTTPException
from extensions import db, bcrypt, login_manager, babel
from config import Config, DEFAULT_SECRET_KEY
from errors import APP_ERRORS, PAGE_NOT_FOUND, INTERNAL_ERROR
from models import SessionUser, LoginSession
from routes import blueprints
from utils import MethodOverrideMiddleware
from database import init_db
import cli

TEXT_PLAIN = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(config_object=Config, base_path=None):
    base_path = (config_object.BASE_PATH if base_path is None else base_path).rstrip('/')

    app = Flask(
        __name__,
        static_folder='public',
        static_url_path=base_path + '/public',
    )
    app.config.from_object(config_object)
    app.config['BASE_PATH'] = base_path

    if not app.testing:
        logging.basicConfig(level=logging.INFO)
    if app.config['SECRET_KEY'] == DEFAULT_SECRET_KEY:
        app.logger.warning("SESSION_SECRET nincs beállítva, az alapértelmezett (nem biztonságos) kulcs él!")

    db.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'login.login'
    login_manager.login_message = "Az oldal megtekintéséhez be kell jelentkezni."
    babel.init_app(app, locale_selector=get_locale)

    # PUT / DELETE HTML űrlapokból: POST + ?_method=
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    for bp in blueprints:
        app.register_blueprint(bp, url_prefix=base_path + (bp.url_prefix or ''))

    register_error_handlers(app)
    cli.init_app(app)

    @app.context_processor
    def inject_defaults():
        user = current_user if current_user.is_authenticated else None
        return dict(title='Tanösvény', current_user=user, base_path=base_path)

    with app.app_context():
        init_db()

    return app


# -------------------------
# LOGIN MANAGER
# -------------------------
@login_manager.user_loader
def load_user(token):
    record = LoginSession.query.filter_by(token=token).first()
    if record is None:
        return None
    if record.is_expired():
        LoginSession.close(token)
        return None
    return SessionUser.from_session(record)


def get_locale():
    langs = current_app.config['LANGUAGES']
    if has_request_context():
        return request.accept_languages.best_match(langs) or langs[0]
    return langs[0]


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if isinstance(e, APP_ERRORS):
            return e.description, e.code, TEXT_PLAIN
        if e.code == 404:
            return PAGE_NOT_FOUND, 404, TEXT_PLAIN
        return e

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Nem kezelt hiba: %s %s", request.method, request.path)
        db.session.rollback()
        return INTERNAL_ERROR, 500, TEXT_PLAIN


# -------------------------
# RUN APP
# -------------------------
if __name__ == "__main__":
    app = create_app()
    port = app.config['PORT']
    app.logger.info("Szerver fut: http://0.0.0.0:%s%s/", port, app.config['BASE_PATH'])
    app.run('0.0.0.0', port=port)
