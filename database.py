# database.py
import logging
from threading import Lock
from sqlalchemy import text
from extensions import db
from models import TRAIL_DETAILS_VIEW_SQL
from security import seed_admin

logger = logging.getLogger(__name__)

_schema_lock = Lock()


def init_db():
    """Táblák, nézet és admin fiók. Többször is futtatható."""
    with _schema_lock:
        db.create_all()
        with db.engine.begin() as connection:
            connection.execute(text(TRAIL_DETAILS_VIEW_SQL))
        seeded = seed_admin()
    logger.info("Database ready (%s)", db.engine.url.render_as_string(hide_password=True))
    return seeded
