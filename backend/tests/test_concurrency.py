import threading
from concurrent.futures import ThreadPoolExecutor

from sqlalchemy import event
from sqlalchemy.orm import Session

from schemas import validate_movie
from conftest import MATRIX_ID, SEED_COUNT


def test_request_teardown_mid_insert_keeps_the_write(app, new_movie):
    store = app.extensions["movie_store"]
    read_done, finish_request = threading.Event(), threading.Event()

    def other_request():
        with app.app_context():
            store.list()
            read_done.set()
            finish_request.wait(5)

    reader = threading.Thread(target=other_request)
    reader.start()
    assert read_done.wait(5)

    # end the other request between flush and commit
    def end_other_request(session, flush_context):
        finish_request.set()
        reader.join(5)

    event.listen(Session, "after_flush", end_other_request)
    try:
        with app.app_context():
            movie = store.insert(validate_movie(new_movie).data)
    finally:
        event.remove(Session, "after_flush", end_other_request)

    assert not reader.is_alive()
    with app.app_context():
        assert store.get_by_id(movie.id).title == new_movie["title"]
        assert len(store.list()) == SEED_COUNT + 1


def test_concurrent_requests_keep_every_write(app, new_movie):
    writes = 20

    def create(i):
        response = app.test_client().post("/movies", json={**new_movie, "title": f"Arrival {i}"})
        return response.status_code, response.get_json()["id"]

    def read(_):
        response = app.test_client().get("/movies")
        return response.status_code, [m["id"] for m in response.get_json()]

    def patch(i):
        return app.test_client().patch(f"/movies/{MATRIX_ID}", json={"rating": i % 10}).status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = pool.map(create, range(writes))
        reads = pool.map(read, range(writes))
        patched = pool.map(patch, range(writes))
        created, reads, patched = list(created), list(reads), list(patched)

    assert [status for status, _ in created] == [201] * writes
    assert patched == [201] * writes
    new_ids = {movie_id for _, movie_id in created}
    assert len(new_ids) == writes

    for status, ids in reads:
        assert status == 200
        assert len(ids) == len(set(ids))
        assert SEED_COUNT <= len(ids) <= SEED_COUNT + writes

    final = [m["id"] for m in app.test_client().get("/movies").get_json()]
    assert len(final) == SEED_COUNT + writes
    assert new_ids <= set(final)
