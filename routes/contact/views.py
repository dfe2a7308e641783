# routes/contact/views.py
from flask import request, render_template, current_app
from extensions import db
from models import Message
from utils import require_fields
from . import contact_bp


@contact_bp.route('/contact', endpoint='contact', methods=['GET'])
def contact():
    return render_template('contact.html', title='Tanösvény – Kapcsolat')


@contact_bp.route('/contact', endpoint='contact_send', methods=['POST'])
def contact_send():
    name, email, message = require_fields(
        request.form, "name", "email", "message", message="Minden mező kötelező."
    )

    db.session.add(Message(name=name, email=email, message=message))
    db.session.commit()
    current_app.logger.info("Új üzenet érkezett: %s", email)

    return render_template('contact_success.html', title='Üzenet elküldve – Tanösvény')
