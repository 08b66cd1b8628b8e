from fastapi import status


class ClubError(Exception):
    """Base class for domain errors surfaced to API clients"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ClubError):
    status_code = status.HTTP_404_NOT_FOUND


class Forbidden(ClubError):
    status_code = status.HTTP_403_FORBIDDEN


class Conflict(ClubError):
    status_code = status.HTTP_409_CONFLICT


class DeadlinePassed(ClubError):
    status_code = status.HTTP_400_BAD_REQUEST


class AlreadyGraded(ClubError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(ClubError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidScore(ValidationError):
    pass


class AuthenticationFailed(ClubError):
    status_code = status.HTTP_401_UNAUTHORIZED
