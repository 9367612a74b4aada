import logging
from typing import List
from sqlalchemy.orm import Session
from videoteca.core.exceptions import MovieNotFoundException
from videoteca.models.movie import Movie
from videoteca.repositories.movie_repository import MovieRepository
from videoteca.schemas.movie import MovieCreate, MovieUpdate, MovieRating

logger = logging.getLogger(__name__)

class MovieService:
    """Movie collection operations, always scoped to one owner.

    The owner id comes from the verified request context; nothing in a
    request body can change which rows a call touches.
    """

    def __init__(self, db: Session):
        self.db = db
        self.movie_repo = MovieRepository(db)

    def list_movies(self, owner_id: str) -> List[Movie]:
        return self.movie_repo.list_for_owner(owner_id)

    def get_movie(self, movie_id: str, owner_id: str) -> Movie:
        movie = self.movie_repo.get_for_owner(movie_id, owner_id)
        if not movie:
            raise MovieNotFoundException()
        return movie

    def create_movie(self, owner_id: str, movie_data: MovieCreate) -> Movie:
        movie = self.movie_repo.create_for_owner(owner_id, movie_data.model_dump())
        logger.info(f"Movie {movie.id} created for user {owner_id}")
        return movie

    def update_movie(self, movie_id: str, owner_id: str, movie_data: MovieUpdate) -> Movie:
        count = self.movie_repo.update_for_owner(
            movie_id, owner_id, movie_data.model_dump(exclude_unset=True)
        )
        return self._refetch_updated(movie_id, owner_id, count)

    def rate_movie(self, movie_id: str, owner_id: str, rating_data: MovieRating) -> Movie:
        count = self.movie_repo.update_for_owner(movie_id, owner_id, {"rating": rating_data.rating})
        return self._refetch_updated(movie_id, owner_id, count)

    def delete_movie(self, movie_id: str, owner_id: str) -> None:
        count = self.movie_repo.delete_for_owner(movie_id, owner_id)
        if count == 0:
            raise MovieNotFoundException()
        logger.info(f"Movie {movie_id} deleted by user {owner_id}")

    def count_movies(self) -> int:
        """Total movies across all users"""
        return self.movie_repo.count()

    def _refetch_updated(self, movie_id: str, owner_id: str, count: int) -> Movie:
        if count == 0:
            raise MovieNotFoundException()
        movie = self.movie_repo.find_unique(movie_id)
        if not movie:
            # deleted between the update and the re-read
            raise MovieNotFoundException()
        self.db.refresh(movie)
        return movie
