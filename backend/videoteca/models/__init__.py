from videoteca.db import Base
from .movie import Movie
from .user import User

__all__ = ['Base', 'Movie', 'User']
