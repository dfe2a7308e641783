# routes/__init__.py
from .home import home_bp
from .catalog import catalog_bp
from .contact import contact_bp
from .inbox import inbox_bp
from .register import register_bp
from .login import login_bp
from .admin import admin_bp
from .trails import trails_bp

blueprints = [
    home_bp,
    catalog_bp,
    contact_bp,
    inbox_bp,
    register_bp,
    login_bp,
    admin_bp,
    trails_bp
]
