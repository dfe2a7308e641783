# routes/trails/__init__.py
from flask import Blueprint

trails_bp = Blueprint('trails', __name__, url_prefix='/trails')

from . import views  # a view-ek itt kerülnek betöltésre (nem main-t hívunk)
