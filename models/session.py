# -------------------------------------------------------
# MODELL: Szerver oldali bejelentkezési session
# -------------------------------------------------------
import secrets
from datetime import datetime
from extensions import db


class LoginSession(db.Model):
    __tablename__ = "login_sessions"

    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(128), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # --- a session tartalma: {id, name, email, role} ---
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(150), nullable=False)
    role = db.Column(db.String(20), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.now, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)

    @staticmethod
    def open_for_user(user, lifetime):
        """Új session a felhasználónak; a lejártakat közben kitakarítja."""
        now = datetime.now()
        LoginSession.query.filter(LoginSession.expires_at <= now).delete()
        record = LoginSession(
            token=secrets.token_urlsafe(48),
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            created_at=now,
            expires_at=now + lifetime,
        )
        db.session.add(record)
        db.session.commit()
        return record

    @staticmethod
    def close(token):
        LoginSession.query.filter_by(token=token).delete()
        db.session.commit()

    def is_expired(self):
        return self.expires_at <= datetime.now()

    def payload(self):
        return {"id": self.user_id, "name": self.name, "email": self.email, "role": self.role}

    def __repr__(self):
        return f"<LoginSession user={self.user_id} expires={self.expires_at}>"
