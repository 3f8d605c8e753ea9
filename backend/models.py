# backend/models.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

MOVIE_FIELDS = ("title", "year", "director", "duration", "genre", "rating")


class Movie(db.Model):
    __tablename__ = "movies"
    # insertion order; never exposed
    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(36), unique=True, nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    year = db.Column(db.Integer, nullable=False)
    director = db.Column(db.String(255), nullable=False)
    duration = db.Column(db.Integer, nullable=False)
    genre = db.Column(db.JSON, nullable=False, default=list)
    rating = db.Column(db.Float, nullable=False, default=5)

    def to_dict(self):
        data = {"id": self.id}
        for name in MOVIE_FIELDS:
            data[name] = getattr(self, name)
        data["genre"] = list(self.genre or [])
        return data

    def __repr__(self):
        return f"<Movie {self.id} {self.title!r}>"
