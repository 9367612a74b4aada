"""
Tests for the datastore adapter (BaseRepository / MovieRepository / UserRepository).
"""
import pytest
from sqlalchemy.exc import OperationalError

from videoteca.models.movie import Movie
from videoteca.repositories import MovieRepository, UserRepository


def make_movie(repo, owner, title="Inception", **extra):
    data = {"title": title, "director": "Christopher Nolan", "year": 2010}
    data.update(extra)
    return repo.create_for_owner(owner, data)


class TestMovieRepository:
    """Owner-scoped queries and count results."""

    def test_list_for_owner_only_returns_owned_movies_newest_first(self, db_session):
        repo = MovieRepository(db_session)
        first = make_movie(repo, "user-1", "Memento")
        second = make_movie(repo, "user-1", "Tenet")
        make_movie(repo, "user-2", "Alien")

        movies = repo.list_for_owner("user-1")

        assert [m.id for m in movies] == [second.id, first.id]

    def test_create_for_owner_cannot_be_overridden_by_data(self, db_session):
        repo = MovieRepository(db_session)
        movie = make_movie(repo, "user-1", owner_id="intruder")
        assert movie.owner_id == "user-1"
        assert movie.poster_url is None
        assert movie.created_at is not None

    def test_get_for_owner_requires_matching_owner(self, db_session):
        repo = MovieRepository(db_session)
        movie = make_movie(repo, "user-1")
        assert repo.get_for_owner(movie.id, "user-1").id == movie.id
        assert repo.get_for_owner(movie.id, "user-2") is None

    def test_update_for_owner_reports_count(self, db_session):
        repo = MovieRepository(db_session)
        movie = make_movie(repo, "user-1")

        assert repo.update_for_owner(movie.id, "user-2", {"title": "Hacked"}) == 0
        assert repo.update_for_owner(movie.id, "user-1", {"title": "Inception (Director's Cut)"}) == 1

        stored = repo.find_unique(movie.id)
        db_session.refresh(stored)
        assert stored.title == "Inception (Director's Cut)"

    def test_update_for_owner_ignores_owner_and_id_fields(self, db_session):
        repo = MovieRepository(db_session)
        movie = make_movie(repo, "user-1")

        repo.update_for_owner(movie.id, "user-1", {"owner_id": "user-2", "id": "other", "year": 2011})

        stored = repo.find_unique(movie.id)
        db_session.refresh(stored)
        assert stored.owner_id == "user-1"
        assert stored.year == 2011

    def test_delete_for_owner_reports_count(self, db_session):
        repo = MovieRepository(db_session)
        movie_id = make_movie(repo, "user-1").id

        assert repo.delete_for_owner(movie_id, "user-2") == 0
        assert repo.delete_for_owner(movie_id, "user-1") == 1
        assert repo.delete_for_owner(movie_id, "user-1") == 0
        assert repo.count() == 0

    def test_find_many_without_filter_and_count(self, db_session):
        repo = MovieRepository(db_session)
        make_movie(repo, "user-1")
        make_movie(repo, "user-2")
        assert len(repo.find_many()) == 2
        assert repo.count() == 2
        assert repo.count({"owner_id": "user-2"}) == 1
        assert repo.find_first({"owner_id": "nobody"}) is None

    def test_failed_write_rolls_back_session(self, db_session, monkeypatch):
        repo = MovieRepository(db_session)
        movie_id = make_movie(repo, "user-1").id
        rollbacks = []
        real_rollback = db_session.rollback

        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        def recording_rollback():
            rollbacks.append(True)
            real_rollback()

        monkeypatch.setattr(db_session, "commit", failing_commit)
        monkeypatch.setattr(db_session, "rollback", recording_rollback)

        with pytest.raises(OperationalError):
            repo.update_for_owner(movie_id, "user-1", {"title": "Lost"})

        assert rollbacks == [True]
        monkeypatch.undo()
        assert repo.get_for_owner(movie_id, "user-1").title == "Inception"


class TestUserRepository:

    def test_create_and_lookup_by_email(self, db_session):
        repo = UserRepository(db_session)
        user = repo.create_user("ana@example.com", "hash", name="Ana")

        assert repo.email_exists("ana@example.com")
        assert not repo.email_exists("otro@example.com")
        assert repo.get_by_email("ana@example.com").id == user.id
        assert len(user.id) == 36

    def test_deleting_user_cascades_to_movies(self, db_session):
        users = UserRepository(db_session)
        movies = MovieRepository(db_session)
        user = users.create_user("ana@example.com", "hash")
        make_movie(movies, user.id)

        db_session.delete(user)
        db_session.commit()

        assert db_session.query(Movie).count() == 0
