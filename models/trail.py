# -------------------------------------------------------
# MODELL: Nemzeti park, település, tanösvény (ut)
# -------------------------------------------------------
from sqlalchemy import table, column
from extensions import db


class Park(db.Model):
    __tablename__ = "np"

    id = db.Column(db.Integer, primary_key=True)
    nev = db.Column(db.String(150), nullable=False)

    settlements = db.relationship("Settlement", back_populates="park", lazy=True)


class Settlement(db.Model):
    __tablename__ = "telepules"

    id = db.Column(db.Integer, primary_key=True)
    nev = db.Column(db.String(150), nullable=False)
    npid = db.Column(db.Integer, db.ForeignKey("np.id"), nullable=False)

    park = db.relationship("Park", back_populates="settlements")
    trails = db.relationship("Trail", back_populates="settlement", lazy=True)


class Trail(db.Model):
    __tablename__ = "ut"

    id = db.Column(db.Integer, primary_key=True)
    nev = db.Column(db.String(200), nullable=False)
    hossz = db.Column(db.Float)         # km
    allomas = db.Column(db.Integer)     # állomások száma
    ido = db.Column(db.Float)           # óra
    vezetes = db.Column(db.Boolean, nullable=False, default=False)
    telepulesid = db.Column(db.Integer, db.ForeignKey("telepules.id"), nullable=False)

    settlement = db.relationship("Settlement", back_populates="trails")

    def __repr__(self):
        return f"<Trail {self.id} {self.nev}>"


# --- csak olvasható nézet, a database.init_db hozza létre ---
TRAIL_DETAILS_VIEW_SQL = """
CREATE VIEW IF NOT EXISTS v_ut_reszletes AS
SELECT ut.id AS id,
       ut.nev AS ut_nev,
       ut.hossz AS hossz,
       ut.allomas AS allomas,
       ut.ido AS ido,
       ut.vezetes AS vezetes,
       telepules.nev AS telepules_nev,
       np.nev AS np_nev
FROM ut
JOIN telepules ON telepules.id = ut.telepulesid
JOIN np ON np.id = telepules.npid
"""

# nincs a metadata-ban, így a create_all nem próbál táblát csinálni belőle
trail_details = table(
    "v_ut_reszletes",
    column("id"),
    column("ut_nev"),
    column("hossz"),
    column("allomas"),
    column("ido"),
    column("vezetes"),
    column("telepules_nev"),
    column("np_nev"),
)
