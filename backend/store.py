# backend/store.py
"""In-memory movie collection backed by the app's SQLite engine."""
import json
import logging
import threading
import uuid
from contextlib import contextmanager

from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker
from werkzeug.exceptions import NotFound

from models import Movie
from schemas import MovieRecord, format_errors

logger = logging.getLogger(__name__)


class MovieNotFound(NotFound):
    description = "Movie not found"


class MovieStore:
    """Owns the movie collection for one application.

    Callers hand in data that already passed validation; the store only
    enforces identity and ordering. The store keeps a private session,
    separate from the request-scoped ``db.session``, and only touches it
    while holding its lock, so request teardown can never roll back a
    write in flight. Returned movies are detached snapshots.
    """

    def __init__(self, engine):
        self._session = sessionmaker(bind=engine, expire_on_commit=False)()
        self._lock = threading.RLock()

    @contextmanager
    def _transaction(self):
        with self._lock:
            try:
                yield self._session
                self._session.commit()
            except Exception:
                self._session.rollback()
                raise
            finally:
                self._session.expunge_all()

    def _query(self, session):
        return session.query(Movie).order_by(Movie.seq)

    def _find(self, session, movie_id):
        movie = self._query(session).filter(Movie.id == movie_id).first()
        if movie is None:
            raise MovieNotFound()
        return movie

    def list(self):
        with self._transaction() as session:
            return self._query(session).all()

    def list_by_genre(self, tag):
        wanted = tag.lower()
        with self._transaction() as session:
            movies = self._query(session).all()
        return [m for m in movies if any(g.lower() == wanted for g in m.genre)]

    def get_by_id(self, movie_id):
        with self._transaction() as session:
            return self._query(session).filter(Movie.id == movie_id).first()

    def insert(self, validated, movie_id=None):
        fields = {k: v for k, v in validated.items() if k != "id"}
        movie = Movie(id=movie_id or str(uuid.uuid4()), **fields)
        with self._transaction() as session:
            session.add(movie)
        logger.info("Inserted movie %s (%r)", movie.id, movie.title)
        return movie

    def update_by_id(self, movie_id, partial):
        with self._transaction() as session:
            movie = self._find(session, movie_id)
            for name, value in partial.items():
                if name == "id":
                    continue
                setattr(movie, name, list(value) if name == "genre" else value)
        logger.info("Updated movie %s: %s", movie_id, sorted(partial))
        return movie

    def delete_by_id(self, movie_id):
        with self._transaction() as session:
            session.delete(self._find(session, movie_id))
        logger.info("Deleted movie %s", movie_id)

    def load_seed(self, path):
        """Insert every record of a JSON seed file, keeping its ids."""
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)

        loaded = 0
        for i, raw in enumerate(records):
            try:
                record = MovieRecord.model_validate(raw)
            except ValidationError as exc:
                raise ValueError(f"Invalid seed record #{i} in {path}: {format_errors(exc)}") from exc
            data = record.model_dump()
            self.insert(data, movie_id=data["id"])
            loaded += 1

        logger.info("Seeded %d movies from %s", loaded, path)
        return loaded
