# routes/inbox/views.py
from flask import render_template
from flask_login import login_required
from sqlalchemy import select, type_coerce, String
from extensions import db
from models import Message
from utils import format_timestamp, no_cache
from . import inbox_bp


@inbox_bp.route('/inbox', endpoint='inbox')
@login_required
@no_cache
def inbox():
    # a created_at nyers értéke kell: bármit tárol az sqlite, a formázó kezeli
    rows = db.session.execute(
        select(
            Message.id, Message.name, Message.email, Message.message,
            type_coerce(Message.created_at, String).label('created_at'),
        ).order_by(Message.created_at.desc(), Message.id.desc())
    ).mappings().all()

    messages = []
    for row in rows:
        msg = dict(row)
        msg['created_at_formatted'] = format_timestamp(msg['created_at'])
        messages.append(msg)

    return render_template('inbox.html', title='Tanösvény – Üzenetek', messages=messages)
