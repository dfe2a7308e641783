# utils.py
import logging
import re
from datetime import datetime, timezone
from functools import wraps
from urllib.parse import parse_qs
from flask import make_response, url_for
from flask_babel import format_datetime
from flask_login import current_user
from errors import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

EPOCH_PATTERN = re.compile(r'[+-]?\d+(?:\.\d*)?')


def no_cache(view):
    @wraps(view)
    def no_cache_view(*args, **kwargs):
        response = make_response(view(*args, **kwargs))
        response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response
    return no_cache_view


def admin_required(view):
    """Csak admin szerepkörrel; belépés nélkül is 403, nem átirányítás."""
    @wraps(view)
    def admin_view(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.is_admin:
            raise AuthorizationError()
        return view(*args, **kwargs)
    return admin_view


def safe_next_url(target):
    # csak helyi útvonalra irányítunk vissza
    if target and target.startswith('/') and not target.startswith('//') and '\\' not in target:
        return target
    return url_for('home.index')


def require_fields(form, *names, message=None):
    values = [form.get(name) for name in names]
    if not all(values):
        raise ValidationError(message)
    return values


def parse_float(value):
    if not value:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        raise ValidationError("Érvénytelen számérték.")


def parse_int(value):
    if not value:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        raise ValidationError("Érvénytelen számérték.")


def _from_epoch_ms(value):
    return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)


def parse_timestamp(value):
    """datetime, epoch (ms), "YYYY-MM-DD HH:MM:SS" vagy számot tartalmazó szöveg."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    try:
        if isinstance(value, (int, float)):
            return _from_epoch_ms(value)
        text = str(value).strip()
        if not text:
            return None
        # csupa szám -> epoch (ms), a fromisoformat elé
        if EPOCH_PATTERN.fullmatch(text):
            return _from_epoch_ms(text)
        return datetime.fromisoformat(text.replace(' ', 'T', 1))
    except (ValueError, OverflowError, OSError):
        return None


def format_timestamp(value):
    """Rövid magyar dátum/idő, pl. "2024. 03. 05. 14:30"; ha nem értelmezhető, üres."""
    dt = parse_timestamp(value)
    if dt is None:
        return ''
    try:
        return format_datetime(dt, 'short')
    except (ValueError, OverflowError):
        logger.debug("Could not format timestamp %r", value)
        return ''


class MethodOverrideMiddleware:
    """POST kérés PUT/DELETE-ként, ha a query stringben _method=PUT|DELETE
    vagy X-HTTP-Method-Override fejléc van."""

    allowed_methods = frozenset(['PUT', 'DELETE', 'PATCH'])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                method = parse_qs(environ.get('QUERY_STRING', '')).get('_method', [''])[0]
            method = method.upper()
            if method in self.allowed_methods:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
