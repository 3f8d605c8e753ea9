# backend/app.py
import os
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import Config
from cors import apply_decision, authorize
from models import db
from schemas import validate_movie, validate_movie_partial
from store import MovieNotFound, MovieStore


def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])
    db.init_app(app)

    with app.app_context():
        db.create_all()
        if store is None:
            store = MovieStore(db.engine)
        if app.config.get("SEED_FILE"):
            store.load_seed(app.config["SEED_FILE"])

    app.extensions["movie_store"] = store

    def gate(response, preflight=False):
        decision = authorize(request.headers.get("Origin"), app.config["ACCEPTED_ORIGINS"], preflight)
        return apply_decision(decision, response)

    def validation_failed(result):
        app.logger.info("Rejected %s %s: %d validation error(s)", request.method, request.path, len(result.errors))
        return jsonify({"error": result.errors}), 400

    # ---------------- ERRORS ----------------
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"message": e.description}), e.code

    # ---------------- HOME ----------------
    @app.route("/")
    def home():
        return "<h1>Main Page</h1>"

    # ---------------- LIST MOVIES ----------------
    @app.route("/movies", methods=["GET"], provide_automatic_options=False)
    def list_movies():
        genre = request.args.get("genre")
        movies = store.list_by_genre(genre) if genre else store.list()
        return gate(jsonify([m.to_dict() for m in movies]))

    # ---------------- GET MOVIE ----------------
    @app.route("/movies/<movie_id>", methods=["GET"], provide_automatic_options=False)
    def get_movie(movie_id):
        movie = store.get_by_id(movie_id)
        if not movie:
            return jsonify({"message": "Movie not found"}), 404
        return jsonify(movie.to_dict())

    # ---------------- CREATE MOVIE ----------------
    @app.route("/movies", methods=["POST"], provide_automatic_options=False)
    def create_movie():
        result = validate_movie(request.get_json(silent=True))
        if not result.success:
            return validation_failed(result)

        movie = store.insert(result.data)
        return jsonify(movie.to_dict()), 201

    # ---------------- UPDATE MOVIE ----------------
    @app.route("/movies/<movie_id>", methods=["PATCH"], provide_automatic_options=False)
    def update_movie(movie_id):
        result = validate_movie_partial(request.get_json(silent=True))
        if not result.success:
            return validation_failed(result)

        # MovieNotFound is rendered by http_error
        movie = store.update_by_id(movie_id, result.data)
        return jsonify(movie.to_dict()), 201

    # ---------------- DELETE MOVIE ----------------
    @app.route("/movies/<movie_id>", methods=["DELETE"], provide_automatic_options=False)
    def delete_movie(movie_id):
        try:
            store.delete_by_id(movie_id)
        except MovieNotFound as e:
            return gate(jsonify({"message": e.description})), 404
        return gate(jsonify({"message": "Movie deleted"}))

    # ---------------- PRE-FLIGHT ----------------
    @app.route("/movies", methods=["OPTIONS"])
    @app.route("/movies/<movie_id>", methods=["OPTIONS"])
    def preflight(movie_id=None):
        return gate(app.response_class(status=200), preflight=True)

    return app


if __name__ == "__main__":
    app = create_app()
    app.logger.info("server started on port: http://localhost:%s", app.config["PORT"])
    app.run(port=app.config["PORT"], debug=(os.getenv("FLASK_ENV") == "development"))
