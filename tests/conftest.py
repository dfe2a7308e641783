import pytest
from flask import template_rendered

from config import TestingConfig
from extensions import db
from main import create_app
from models import Park, Role, Settlement, Trail, User
from security import hash_password

USER_EMAIL = "elek@example.com"
USER_PASSWORD = "Jelszo123"


def _make_app(tmp_path, base_path=None):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"

    return create_app(_Config, base_path=base_path)


@pytest.fixture
def app(tmp_path):
    app = _make_app(tmp_path)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


@pytest.fixture
def user(app):
    with app.app_context():
        u = User(
            name="Teszt Elek",
            email=USER_EMAIL,
            password_hash=hash_password(USER_PASSWORD),
            role=Role.REGISTERED,
        )
        db.session.add(u)
        db.session.commit()
        return u.id


@pytest.fixture
def login(client):
    def _login(email=USER_EMAIL, password=USER_PASSWORD, next_url=None):
        data = {"email": email, "password": password}
        if next_url is not None:
            data["next"] = next_url
        return client.post("/login", data=data)
    return _login


@pytest.fixture
def logged_in(user, login):
    resp = login()
    assert resp.status_code == 302
    return resp


@pytest.fixture
def catalog_data(app):
    """Két nemzeti park, három település, négy út."""
    with app.app_context():
        bukk = Park(nev="Bükki Nemzeti Park")
        orseg = Park(nev="Őrségi Nemzeti Park")
        db.session.add_all([bukk, orseg])
        db.session.flush()

        szilvasvarad = Settlement(nev="Szilvásvárad", npid=bukk.id)
        repashuta = Settlement(nev="Répáshuta", npid=bukk.id)
        oriszentpeter = Settlement(nev="Őriszentpéter", npid=orseg.id)
        db.session.add_all([szilvasvarad, repashuta, oriszentpeter])
        db.session.flush()

        db.session.add_all([
            Trail(nev="Szalajka-völgy", hossz=4.5, allomas=12, ido=2, vezetes=True,
                  telepulesid=szilvasvarad.id),
            Trail(nev="Bükki karszt", hossz=3.0, allomas=8, ido=1.5, vezetes=False,
                  telepulesid=repashuta.id),
            Trail(nev="Anna-barlang", hossz=1.2, allomas=5, ido=1, vezetes=True,
                  telepulesid=szilvasvarad.id),
            Trail(nev="Harmatfű tanösvény", hossz=2.2, allomas=6, ido=1, vezetes=False,
                  telepulesid=oriszentpeter.id),
        ])
        db.session.commit()
        return {
            "settlements": {
                "Szilvásvárad": szilvasvarad.id,
                "Répáshuta": repashuta.id,
                "Őriszentpéter": oriszentpeter.id,
            }
        }


def context_of(captured, name):
    for template_name, context in reversed(captured):
        if template_name == name:
            return context
    raise AssertionError(f"{name} was not rendered")
