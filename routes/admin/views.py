# routes/admin/views.py
from flask import render_template
from utils import admin_required, no_cache
from . import admin_bp


@admin_bp.route('/admin', endpoint='admin')
@admin_required
@no_cache
def admin():
    return render_template('admin.html', title='Admin – Tanösvény')
