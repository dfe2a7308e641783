# routes/catalog/views.py
from flask import request, render_template
from sqlalchemy import select, case
from extensions import db
from models import trail_details as v
from . import catalog_bp

GUIDED_VALUES = {'yes': 1, 'no': 0}


@catalog_bp.route('/catalog', endpoint='catalog')
def catalog():
    park = request.args.get('park') or None
    settlement = request.args.get('settlement') or None
    guided = request.args.get('guided') or None

    query = select(
        v.c.id, v.c.ut_nev, v.c.hossz, v.c.allomas, v.c.ido,
        case((v.c.vezetes == 1, 'van'), else_='nincs').label('vezetes'),
        v.c.telepules_nev, v.c.np_nev,
    )

    # csak a megadott szűrők kerülnek bele, mindig kötött paraméterként
    if park:
        query = query.where(v.c.np_nev == park)
    if settlement:
        query = query.where(v.c.telepules_nev == settlement)
    if guided in GUIDED_VALUES:
        query = query.where(v.c.vezetes == GUIDED_VALUES[guided])

    query = query.order_by(v.c.ut_nev)

    trails = db.session.execute(query).mappings().all()
    parks = db.session.execute(select(v.c.np_nev).distinct().order_by(v.c.np_nev)).scalars().all()
    settlements = db.session.execute(
        select(v.c.telepules_nev).distinct().order_by(v.c.telepules_nev)
    ).scalars().all()

    return render_template(
        'catalog.html',
        title='Tanösvény – Adatbázis',
        trails=trails,
        parks=parks,
        settlements=settlements,
        filters={'park': park, 'settlement': settlement, 'guided': guided},
    )
