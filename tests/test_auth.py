from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlsplit

import pytest

from extensions import db
from models import LoginSession, Role, User
from conftest import USER_EMAIL, context_of


def _user_count(app, email):
    with app.app_context():
        return User.query.filter_by(email=email).count()


def test_register_creates_user_and_redirects_to_login(app, client):
    resp = client.post("/register", data={"name": "Kis Anna", "email": "anna@example.com", "password": "titok"})

    assert resp.status_code == 302
    assert resp.headers["Location"] == "/login"
    with app.app_context():
        user = User.query.filter_by(email="anna@example.com").one()
        assert user.role is Role.REGISTERED
        assert user.password_hash != "titok"


@pytest.mark.parametrize("missing", ["name", "email", "password"])
def test_register_requires_every_field(app, client, missing):
    data = {"name": "Kis Anna", "email": "anna@example.com", "password": "titok"}
    data[missing] = ""

    resp = client.post("/register", data=data)

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Hiányzó adatok."
    assert _user_count(app, "anna@example.com") == 0


def test_register_duplicate_email_is_rejected(app, client):
    data = {"name": "Kis Anna", "email": "anna@example.com", "password": "titok"}
    assert client.post("/register", data=data).status_code == 302

    resp = client.post("/register", data=dict(data, name="Másik Anna"))

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Már van ilyen emaillel fiók."
    assert _user_count(app, "anna@example.com") == 1


def test_login_page_carries_next(client, captured_templates):
    resp = client.get("/login?next=/inbox")

    assert resp.status_code == 200
    assert context_of(captured_templates, "auth/login.html")["next"] == "/inbox"


def test_login_page_defaults_next_to_home(client, captured_templates):
    client.get("/login")

    assert context_of(captured_templates, "auth/login.html")["next"] == "/"


def test_wrong_password_and_unknown_email_look_the_same(user, login):
    wrong_password = login(password="rossz-jelszo")
    unknown_email = login(email="senki@example.com")

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.get_data(as_text=True) == unknown_email.get_data(as_text=True) == "Hibás bejelentkezés."


def test_login_opens_server_side_session(app, client, user, login):
    login()

    with app.app_context():
        record = LoginSession.query.filter_by(user_id=user).one()
        assert record.payload() == {
            "id": user, "name": "Teszt Elek", "email": USER_EMAIL, "role": "registered",
        }
        token = record.token
    with client.session_transaction() as sess:
        assert sess["_user_id"] == token
        assert "user" not in sess
        assert sess.permanent


def test_session_cookie_expires_two_hours_after_login(client, logged_in):
    cookie = client.get_cookie("session")
    remaining = cookie.expires - datetime.now(timezone.utc)
    assert timedelta(hours=1, minutes=59) < remaining <= timedelta(hours=2, minutes=1)

    resp = client.get("/inbox")

    assert resp.status_code == 200
    assert "Set-Cookie" not in resp.headers
    assert client.get_cookie("session").expires == cookie.expires


def test_session_past_its_lifetime_is_rejected(app, client, logged_in):
    with app.app_context():
        LoginSession.query.update({"expires_at": datetime.now() - timedelta(hours=3)})
        db.session.commit()

    resp = client.get("/inbox")

    assert resp.status_code == 302
    assert urlsplit(resp.headers["Location"]).path == "/login"
    with app.app_context():
        assert LoginSession.query.count() == 0


def test_relogin_replaces_previous_session(app, client, user, login):
    login()
    login()

    with app.app_context():
        assert LoginSession.query.filter_by(user_id=user).count() == 1


def test_login_ignores_foreign_next(user, login):
    resp = login(next_url="https://evil.example.com/")

    assert resp.headers["Location"] == "/"


def test_logout_clears_session(app, client, logged_in):
    resp = client.post("/logout")

    assert resp.status_code == 302
    assert resp.headers["Location"] == "/"
    with client.session_transaction() as sess:
        assert "_user_id" not in sess
    with app.app_context():
        assert LoginSession.query.count() == 0
    assert client.get("/inbox").status_code == 302


def test_cookie_from_before_logout_no_longer_authenticates(client, logged_in):
    old_cookie = client.get_cookie("session").value
    assert client.get("/inbox").status_code == 200

    client.post("/logout")
    client.set_cookie("session", old_cookie)
    resp = client.get("/inbox")

    assert resp.status_code == 302
    assert urlsplit(resp.headers["Location"]).path == "/login"


def test_login_required_message_is_shown_once(client):
    client.get("/inbox")

    resp = client.get("/login?next=/inbox")

    assert "Az oldal megtekintéséhez be kell jelentkezni." in resp.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert "_flashes" not in sess
    assert "Az oldal megtekintéséhez" not in client.get("/login").get_data(as_text=True)



@pytest.mark.parametrize("path", ["/inbox", "/trails", "/trails/new", "/trails/1/edit"])
def test_guarded_routes_redirect_to_login_with_next(client, path):
    resp = client.get(path)

    assert resp.status_code == 302
    location = urlsplit(resp.headers["Location"])
    assert location.path == "/login"
    assert parse_qs(location.query)["next"] == [path]


def test_guarded_mutations_redirect_to_login(client):
    resp = client.post("/trails", data={"name": "x"})

    assert resp.status_code == 302
    assert urlsplit(resp.headers["Location"]).path == "/login"


def test_login_returns_to_original_destination(client, user, login):
    location = client.get("/inbox").headers["Location"]
    next_url = parse_qs(urlsplit(location).query)["next"][0]

    resp = login(next_url=next_url)

    assert resp.status_code == 302
    assert resp.headers["Location"] == "/inbox"
    assert client.get("/inbox").status_code == 200


def test_admin_forbidden_for_registered_user(client, logged_in):
    resp = client.get("/admin")

    assert resp.status_code == 403
    assert resp.get_data(as_text=True) == "Hozzáférés megtagadva (admin szükséges)."


def test_admin_forbidden_for_anonymous(client):
    resp = client.get("/admin")

    assert resp.status_code == 403
    assert "Location" not in resp.headers


def test_admin_allowed_for_seeded_admin(app, client, login, captured_templates):
    resp = login(email=app.config["ADMIN_EMAIL"], password=app.config["ADMIN_PASSWORD"])
    assert resp.status_code == 302

    resp = client.get("/admin")

    assert resp.status_code == 200
    assert captured_templates[-1][0] == "admin.html"


def test_corrupt_password_hash_fails_login(app, login):
    with app.app_context():
        db.session.add(User(name="Hibás", email="hibas@example.com", password_hash="nem-bcrypt"))
        db.session.commit()

    resp = login(email="hibas@example.com", password="barmi")

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Hibás bejelentkezés."
