from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from videoteca.repositories.base_repository import BaseRepository
from videoteca.models.movie import Movie

class MovieRepository(BaseRepository[Movie]):
    """Movie repository; every per-user method takes the owner explicitly"""

    def __init__(self, db: Session):
        super().__init__(Movie, db)

    def list_for_owner(self, owner_id: str) -> List[Movie]:
        """Owner's movies, newest first"""
        return self.find_many({"owner_id": owner_id}, order_by=Movie.created_at, descending=True)

    def get_for_owner(self, movie_id: str, owner_id: str) -> Optional[Movie]:
        return self.find_first({"id": movie_id, "owner_id": owner_id})

    def create_for_owner(self, owner_id: str, data: Dict[str, Any]) -> Movie:
        # owner_id is applied last so it cannot be overridden by data
        return self.create({**data, "owner_id": owner_id})

    def update_for_owner(self, movie_id: str, owner_id: str, data: Dict[str, Any]) -> int:
        data = {k: v for k, v in data.items() if k not in ("id", "owner_id")}
        return self.update_many({"id": movie_id, "owner_id": owner_id}, data)

    def delete_for_owner(self, movie_id: str, owner_id: str) -> int:
        return self.delete_many({"id": movie_id, "owner_id": owner_id})
