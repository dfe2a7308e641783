# routes/trails/views.py
from flask import request, render_template, redirect, url_for, current_app
from flask_login import login_required, current_user
from extensions import db
from errors import NotFoundError, ValidationError
from models import Settlement, Trail
from utils import parse_float, parse_int, no_cache
from . import trails_bp


def _settlements():
    return Settlement.query.order_by(Settlement.nev).all()


def _get_trail_or_404(trail_id):
    trail = db.session.get(Trail, trail_id)
    if trail is None:
        raise NotFoundError()
    return trail


def _apply_form(trail, form):
    """Űrlap -> Trail mezők. Üres számmező NULL, vezetés csak "1" esetén igaz."""
    name = form.get('name')
    settlement_id = parse_int(form.get('settlement_id'))
    if not name or settlement_id is None:
        raise ValidationError("Hiányzó adatok.")
    if db.session.get(Settlement, settlement_id) is None:
        raise ValidationError("Ismeretlen település.")

    trail.nev = name
    trail.hossz = parse_float(form.get('length'))
    trail.allomas = parse_int(form.get('stops'))
    trail.ido = parse_float(form.get('duration'))
    trail.vezetes = form.get('guided') == '1'
    trail.telepulesid = settlement_id
    return trail


@trails_bp.route('', endpoint='list', methods=['GET'])
@login_required
@no_cache
def trail_list():
    trails = (
        db.session.query(
            Trail.id, Trail.nev, Trail.hossz, Trail.allomas, Trail.ido, Trail.vezetes,
            Settlement.nev.label('telepules_nev'),
        )
        .join(Settlement, Settlement.id == Trail.telepulesid)
        .order_by(Trail.nev)
        .all()
    )
    return render_template('trails/list.html', title='Útvonalak – Tanösvény', trails=trails)


@trails_bp.route('/new', endpoint='new', methods=['GET'])
@login_required
@no_cache
def trail_new():
    return render_template(
        'trails/form.html',
        title='Új út hozzáadása – Tanösvény',
        trail=None,
        settlements=_settlements(),
    )


@trails_bp.route('', endpoint='create', methods=['POST'])
@login_required
def trail_create():
    trail = _apply_form(Trail(), request.form)
    db.session.add(trail)
    db.session.commit()
    current_app.logger.info("Új út (%s) létrehozva: %s", trail.id, current_user.email)
    return redirect(url_for('trails.list'))


@trails_bp.route('/<int:trail_id>/edit', endpoint='edit', methods=['GET'])
@login_required
@no_cache
def trail_edit(trail_id):
    trail = _get_trail_or_404(trail_id)
    return render_template(
        'trails/form.html',
        title='Út szerkesztése – Tanösvény',
        trail=trail,
        settlements=_settlements(),
    )


@trails_bp.route('/<int:trail_id>', endpoint='update', methods=['PUT'])
@login_required
def trail_update(trail_id):
    trail = _apply_form(_get_trail_or_404(trail_id), request.form)
    db.session.commit()
    current_app.logger.info("Út (%s) módosítva: %s", trail_id, current_user.email)
    return redirect(url_for('trails.list'))


@trails_bp.route('/<int:trail_id>', endpoint='delete', methods=['DELETE'])
@login_required
def trail_delete(trail_id):
    trail = _get_trail_or_404(trail_id)
    db.session.delete(trail)
    db.session.commit()
    current_app.logger.info("Út (%s) törölve: %s", trail_id, current_user.email)
    return redirect(url_for('trails.list'))
