# routes/inbox/__init__.py
from flask import Blueprint

inbox_bp = Blueprint('inbox', __name__)

from . import views  # a view-ek itt kerülnek betöltésre (nem main-t hívunk)
