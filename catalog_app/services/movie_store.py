"""
MovieStore: create, read, update and delete catalog documents.

Every operation returns a StoreResult instead of raising, so the HTTP layer can
map outcomes to responses in one place.
"""

import logging
import uuid
from typing import Any

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, connections, models, transaction

from catalog_app.db_functions import UnicodeLower
from catalog_app.models import Movie
from catalog_app.services.store_result import FieldError, StoreResult

logger = logging.getLogger(__name__)


def whole_number(value: Any) -> int:
    """
    Convert ``value`` to an int without dropping a fractional part.

    Accepts ints, integral floats (``7.0``) and their string forms (``"7"``,
    ``"7.0"``). Raises ValueError for ``7.9`` or ``"7.9"`` where ``int()``
    would silently truncate, and TypeError for values that are not numbers.
    """
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not a whole number")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return whole_number(float(text))
    return int(value)


class MovieStore:
    def __init__(self, using: str = "default"):
        self.using = using

    @classmethod
    def create_from_settings(cls) -> "MovieStore":
        return cls(using=settings.CATALOG_DATABASE_ALIAS)

    def close(self) -> None:
        connections[self.using].close()

    def _queryset(self) -> models.QuerySet[Movie]:
        return Movie.objects.using(self.using)

    # ───────────────────────────── lookups ──────────────────────────

    @staticmethod
    def _primary_key_lookup(key: Any) -> dict[str, uuid.UUID] | None:
        try:
            return {"pk": Movie._meta.pk.to_python(key)}
        except ValidationError:
            return None

    @staticmethod
    def _movie_id_lookup(movie_id: Any) -> dict[str, int] | None:
        try:
            return {"movie_id": whole_number(movie_id)}
        except (TypeError, ValueError):
            return None

    def _get(self, lookup: dict | None) -> StoreResult:
        if lookup is None:
            return StoreResult.not_found()
        try:
            movie = self._queryset().filter(**lookup).first()
        except DatabaseError as e:
            return self._failed("fetch", e)
        if movie is None:
            return StoreResult.not_found()
        return StoreResult.found(movie)

    def get_by_primary_key(self, key: Any) -> StoreResult:
        return self._get(self._primary_key_lookup(key))

    def get_by_movie_id(self, movie_id: Any) -> StoreResult:
        return self._get(self._movie_id_lookup(movie_id))

    def get_by_title_substring(self, pattern: str) -> StoreResult:
        """
        Return the first movie whose title contains ``pattern``, ignoring case.

        This is not a ranked search: only the first match in store order is
        returned, even when several titles match. Case folding covers
        non-ASCII letters on every backend (see ``UnicodeLower``).
        """
        try:
            movie = (
                self._queryset()
                .annotate(title_lower=UnicodeLower("title"))
                .filter(title_lower__contains=pattern.lower())
                .first()
            )
        except DatabaseError as e:
            return self._failed("fetch", e)
        if movie is None:
            return StoreResult.not_found()
        return StoreResult.found(movie)

    def list_all(self, cap: int) -> StoreResult:
        try:
            movies = list(self._queryset().all()[:cap])
        except DatabaseError as e:
            return self._failed("list", e)
        return StoreResult.listing(movies)

    # ───────────────────────────── writers ──────────────────────────

    @staticmethod
    def _normalize(attr: str, value: Any) -> Any:
        """
        Convert a submitted value to what the model field stores.

        Raises ValidationError for fractional values sent to integer fields,
        which the model field would otherwise truncate.
        """
        model_field = Movie._meta.get_field(attr)
        if value == "" and model_field.null:
            return None
        if isinstance(model_field, models.BooleanField) and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "false"):
                return lowered == "true"
        if isinstance(model_field, models.IntegerField) and value is not None:
            try:
                return whole_number(value)
            except (TypeError, ValueError):
                raise ValidationError(f"“{value}” value must be a whole number.")
        return value

    def _assign(self, movie: Movie, fields: dict[str, Any]) -> list[FieldError]:
        """
        Copy known document keys onto ``movie`` and validate the result.

        Unknown keys (including ``_id``) are ignored, so the primary key can
        never be reassigned. Returns the validation failures, if any.
        """
        submitted: dict[str, Any] = {}
        rejected: dict[str, list[str]] = {}
        for key, value in fields.items():
            attr = Movie.attribute_for(key)
            if attr is None:
                continue
            submitted[attr] = value
            try:
                setattr(movie, attr, self._normalize(attr, value))
            except ValidationError as e:
                rejected[attr] = e.messages

        try:
            movie.full_clean(exclude=list(rejected), validate_unique=False)
        except ValidationError as e:
            rejected.update(e.message_dict)
        return [
            FieldError(
                path=Movie.document_key_for(attr),
                msg=" ".join(messages),
                value=submitted.get(attr),
            )
            for attr, messages in rejected.items()
        ]

    def create(self, fields: dict[str, Any]) -> StoreResult:
        movie = Movie()
        errors = self._assign(movie, fields)
        if errors:
            logger.info(f"Rejected movie create: {[e.path for e in errors]}")
            return StoreResult.invalid(errors)

        try:
            if self._queryset().filter(movie_id=movie.movie_id).exists():
                logger.info(f"Rejected duplicate Movie_ID {movie.movie_id}")
                return StoreResult.duplicate(movie.movie_id)
            with transaction.atomic(using=self.using):
                movie.save(using=self.using, force_insert=True)
        except IntegrityError:
            # Another request inserted the same Movie_ID after the existence check
            logger.warning(f"Unique constraint rejected Movie_ID {movie.movie_id}")
            return StoreResult.duplicate(movie.movie_id)
        except DatabaseError as e:
            return self._failed("create", e)

        logger.info(f"Created movie {movie} (Movie_ID={movie.movie_id}, id={movie.pk})")
        return StoreResult.found(movie)

    def _update(self, lookup: dict | None, fields: dict[str, Any]) -> StoreResult:
        if lookup is None:
            return StoreResult.not_found()
        try:
            with transaction.atomic(using=self.using):
                movie = self._queryset().select_for_update().filter(**lookup).first()
                if movie is None:
                    return StoreResult.not_found()
                errors = self._assign(movie, fields)
                if errors:
                    return StoreResult.invalid(errors)
                movie.save(using=self.using)
        except IntegrityError:
            return StoreResult.duplicate(fields.get("Movie_ID"))
        except DatabaseError as e:
            return self._failed("update", e)

        logger.info(f"Updated movie {movie} (id={movie.pk}): {sorted(fields)}")
        return StoreResult.found(movie)

    def update_by_primary_key(self, key: Any, fields: dict[str, Any]) -> StoreResult:
        return self._update(self._primary_key_lookup(key), fields)

    def update_by_movie_id(self, movie_id: Any, fields: dict[str, Any]) -> StoreResult:
        return self._update(self._movie_id_lookup(movie_id), fields)

    def _delete(self, lookup: dict | None) -> StoreResult:
        if lookup is None:
            return StoreResult.not_found()
        try:
            with transaction.atomic(using=self.using):
                movie = self._queryset().select_for_update().filter(**lookup).first()
                if movie is None:
                    return StoreResult.not_found()
                pk = movie.pk
                movie.delete(using=self.using)
        except DatabaseError as e:
            return self._failed("delete", e)

        # Model.delete() clears the primary key; the caller gets the record as it was
        movie.pk = pk
        logger.info(f"Deleted movie {movie} (Movie_ID={movie.movie_id}, id={pk})")
        return StoreResult.found(movie)

    def delete_by_primary_key(self, key: Any) -> StoreResult:
        return self._delete(self._primary_key_lookup(key))

    def delete_by_movie_id(self, movie_id: Any) -> StoreResult:
        return self._delete(self._movie_id_lookup(movie_id))

    def _failed(self, action: str, error: DatabaseError) -> StoreResult:
        logger.error(f"Movie store failed to {action} on '{self.using}': {error}")
        return StoreResult.failed(str(error))


def get_movie_store() -> MovieStore:
    """Return the store opened when the catalog app became ready."""
    return apps.get_app_config("catalog_app").movie_store
