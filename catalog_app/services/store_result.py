from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from catalog_app.models import Movie


class StoreOutcome(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    VALIDATION_ERROR = "validation_error"
    STORE_ERROR = "store_error"


@dataclass
class FieldError:
    """A single rejected input field."""

    path: str
    msg: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "field",
            "value": self.value,
            "msg": self.msg,
            "path": self.path,
            "location": "body",
        }


@dataclass
class StoreResult:
    """Result of a MovieStore operation."""

    outcome: StoreOutcome
    movie: Movie | None = None
    movies: list[Movie] = field(default_factory=list)
    errors: list[FieldError] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is StoreOutcome.OK

    @classmethod
    def found(cls, movie: Movie) -> "StoreResult":
        return cls(StoreOutcome.OK, movie=movie)

    @classmethod
    def listing(cls, movies: list[Movie]) -> "StoreResult":
        return cls(StoreOutcome.OK, movies=movies)

    @classmethod
    def not_found(cls) -> "StoreResult":
        return cls(StoreOutcome.NOT_FOUND, error="Movie not found")

    @classmethod
    def duplicate(cls, movie_id) -> "StoreResult":
        return cls(StoreOutcome.DUPLICATE_KEY, error=f"Movie with Movie_ID {movie_id} already exists")

    @classmethod
    def invalid(cls, errors: list[FieldError]) -> "StoreResult":
        return cls(
            StoreOutcome.VALIDATION_ERROR,
            errors=errors,
            error="; ".join(f"{e.path}: {e.msg}" for e in errors),
        )

    @classmethod
    def failed(cls, error: str) -> "StoreResult":
        return cls(StoreOutcome.STORE_ERROR, error=error)
