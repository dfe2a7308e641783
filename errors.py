# errors.py
from werkzeug.exceptions import BadRequest, Forbidden, NotFound

PAGE_NOT_FOUND = "Az oldal nem található."
INTERNAL_ERROR = "Belső szerverhiba."


class ValidationError(BadRequest):
    """Hiányzó vagy hibás mező -> 400."""
    description = "Hiányzó adatok."


class AuthorizationError(Forbidden):
    description = "Hozzáférés megtagadva (admin szükséges)."


class NotFoundError(NotFound):
    description = "Nem található."


APP_ERRORS = (ValidationError, AuthorizationError, NotFoundError)
