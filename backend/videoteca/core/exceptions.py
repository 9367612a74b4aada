import logging
from typing import Any, Dict, List, Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Return error response body"""
        return {"error": self.message}

class UnauthorizedException(BaseAppException):
    """Raised when the bearer credential is missing or invalid"""
    def __init__(self, message: str = "Token inválido o expirado"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class InvalidCredentialsException(BaseAppException):
    """Raised when credentials are invalid"""
    def __init__(self, message: str = "Credenciales inválidas"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class UserNotFoundException(BaseAppException):
    """Raised when user is not found"""
    def __init__(self, message: str = "Usuario no encontrado"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class UserAlreadyExistsException(BaseAppException):
    """Raised when user already exists"""
    def __init__(self, message: str = "El email ya está registrado"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class MovieNotFoundException(BaseAppException):
    """Raised when a movie does not exist or belongs to another user"""
    def __init__(self, message: str = "Película no encontrada"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class ValidationException(BaseAppException):
    """Raised when request data fails validation"""
    def __init__(self, errors: Optional[List[Dict[str, str]]] = None, message: str = "Datos inválidos"):
        self.errors = errors or []
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.errors}

class DatabaseException(BaseAppException):
    """Raised when the datastore fails"""
    def __init__(self, message: str = "Error interno del servidor"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

def handle_exception(e: Exception) -> BaseAppException:
    """Convert any error raised by a handler into an application exception"""
    if isinstance(e, BaseAppException):
        return e
    if isinstance(e, SQLAlchemyError):
        logger.error(f"Database error: {str(e)}")
        return DatabaseException()
    logger.exception(f"Unexpected error: {str(e)}")
    return BaseAppException("Error interno del servidor")
