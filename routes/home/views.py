# routes/home/views.py
from flask import render_template
from . import home_bp


@home_bp.route('/', endpoint='index')
def index():
    return render_template('index.html', title='Tanösvény – Főoldal')
