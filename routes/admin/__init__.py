# routes/admin/__init__.py
from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from . import views  # a view-ek itt kerülnek betöltésre (nem main-t hívunk)
