import enum
from flask_login import UserMixin
from extensions import db


class Role(str, enum.Enum):
    REGISTERED = "registered"
    ADMIN = "admin"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(150), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)
    role = db.Column(
        db.Enum(Role, name="user_role", native_enum=False, length=20,
                values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.REGISTERED,
    )
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"


class SessionUser(UserMixin):
    """A bejelentkezett felhasználó, a szerver oldali session sorából felépítve.

    A Flask-Login azonosító (get_id) a session token, nem a felhasználó id-ja.
    """

    def __init__(self, token, id, name, email, role):
        self.token = token
        self.id = id
        self.name = name
        self.email = email
        self.role = Role(role)

    @classmethod
    def from_session(cls, record):
        payload = record.payload()
        return cls(record.token, payload["id"], payload["name"], payload["email"], payload["role"])

    @property
    def is_admin(self):
        return self.role is Role.ADMIN

    def get_id(self):
        return self.token
