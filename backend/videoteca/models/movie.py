from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from videoteca.db import Base
from videoteca.models.user import generate_id, utcnow

class Movie(Base):
    __tablename__ = "movies"
    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, index=True, nullable=False)
    director = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    poster_url = Column(String, nullable=True)
    rating = Column(Integer, nullable=True)  # 1-10, set by the owner
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    # set in Python for microsecond resolution
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    owner = relationship("User", back_populates="movies")
