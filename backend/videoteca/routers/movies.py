import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from videoteca.core.auth import RequestContext, get_current_user
from videoteca.core.exceptions import DatabaseException, handle_exception
from videoteca.db import get_db
from videoteca.schemas.movie import (
    MovieCreate, MovieUpdate, MovieRating, MovieResponse, PublicStatsResponse
)
from videoteca.services.movie_service import MovieService

router = APIRouter(prefix="/movies", tags=["movies"])
logger = logging.getLogger(__name__)

# Must stay above /{movie_id} so it is not captured as an id
@router.get("/public", response_model=PublicStatsResponse)
def public_movie_count(db: Session = Depends(get_db)):
    """Unauthenticated database connectivity check"""
    try:
        total = MovieService(db).count_movies()
    except Exception as e:
        logger.error(f"Public movie count failed: {str(e)}")
        raise DatabaseException("Error de conexión a la base de datos")
    return PublicStatsResponse(message="Conexión a base de datos exitosa", total_movies=total)

@router.get("", response_model=List[MovieResponse])
def list_movies(
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return MovieService(db).list_movies(ctx.user_id)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: str,
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return MovieService(db).get_movie(movie_id, ctx.user_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_data: MovieCreate,
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return MovieService(db).create_movie(ctx.user_id, movie_data)
    except Exception as e:
        raise handle_exception(e)

@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: str,
    movie_data: MovieUpdate,
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return MovieService(db).update_movie(movie_id, ctx.user_id, movie_data)
    except Exception as e:
        raise handle_exception(e)

@router.patch("/{movie_id}/rating", response_model=MovieResponse)
def rate_movie(
    movie_id: str,
    rating_data: MovieRating,
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return MovieService(db).rate_movie(movie_id, ctx.user_id, rating_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    movie_id: str,
    ctx: RequestContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        MovieService(db).delete_movie(movie_id, ctx.user_id)
    except Exception as e:
        raise handle_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
