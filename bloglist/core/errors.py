# bloglist/core/errors.py

from fastapi import status


# -------------------------------
# Domain errors
# -------------------------------

class BloglistError(Exception):
    """
    Base class for errors that map onto an HTTP response.
    The message is returned to the client as {"error": message}.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    message = "bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(BloglistError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "validation failed"


class DuplicateUsername(ValidationError):
    message = "expected `username` to be unique"


class MalformattedId(BloglistError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "malformatted id"


class Unauthorized(BloglistError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "unauthorized"


class InvalidCredentials(Unauthorized):
    message = "invalid username or password"


class MissingToken(Unauthorized):
    message = "token missing"


class InvalidToken(Unauthorized):
    message = "token invalid"


class UnknownUser(Unauthorized):
    message = "user not found"


class Forbidden(BloglistError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "only the creator can delete a blog"


class NotFound(BloglistError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "not found"
