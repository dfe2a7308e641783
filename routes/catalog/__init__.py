# routes/catalog/__init__.py
from flask import Blueprint

catalog_bp = Blueprint('catalog', __name__)

from . import views  # a view-ek itt kerülnek betöltésre (nem main-t hívunk)
