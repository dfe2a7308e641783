# routes/contact/__init__.py
from flask import Blueprint

contact_bp = Blueprint('contact', __name__)

from . import views  # a view-ek itt kerülnek betöltésre (nem main-t hívunk)
