"""
Movie model for storing catalog documents.
"""

from __future__ import annotations

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

# Document key (as exposed by the JSON API and accepted from forms) -> model attribute.
DOCUMENT_FIELDS: dict[str, str] = {
    "Movie_ID": "movie_id",
    "Title": "title",
    "Year": "year",
    "Rated": "rated",
    "Released": "released",
    "Runtime": "runtime",
    "Genre": "genre",
    "Director": "director",
    "Writer": "writer",
    "Actors": "actors",
    "Plot": "plot",
    "Language": "language",
    "Country": "country",
    "Awards": "awards",
    "Poster": "poster",
    "Ratings": "ratings",
    "Metascore": "metascore",
    "imdbRating": "imdb_rating",
    "imdbVotes": "imdb_votes",
    "imdbID": "imdb_id",
    "Type": "media_type",
    "DVD": "dvd",
    "BoxOffice": "box_office",
    "Production": "production",
    "Website": "website",
    "Response": "response",
}


class Movie(models.Model):
    """
    A single movie document in the catalog.

    Field names follow Python conventions; ``DOCUMENT_FIELDS`` maps them to the
    OMDb-style keys used by the API and the HTML forms.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    movie_id = models.IntegerField(
        unique=True,
        help_text="Externally supplied movie identifier",
    )
    title = models.TextField(
        help_text="Movie title",
    )
    year = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Release year",
    )
    rated = models.TextField(blank=True, default="")
    released = models.TextField(
        blank=True,
        default="",
        help_text="Release date as published (e.g., '16 Jul 2010')",
    )
    runtime = models.TextField(blank=True, default="")
    genre = models.TextField(blank=True, default="")
    director = models.TextField(blank=True, default="")
    writer = models.TextField(blank=True, default="")
    actors = models.TextField(blank=True, default="")
    plot = models.TextField(blank=True, default="")
    language = models.TextField(blank=True, default="")
    country = models.TextField(blank=True, default="")
    awards = models.TextField(blank=True, default="")
    poster = models.TextField(
        blank=True,
        default="",
        help_text="URL to movie poster image",
    )
    ratings = models.JSONField(
        default=list,
        blank=True,
        help_text="List of {'Source': ..., 'Value': ...} ratings",
    )
    metascore = models.TextField(blank=True, default="")
    imdb_rating = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0.0), MaxValueValidator(10.0)],
        help_text="IMDB user rating (0.0-10.0)",
    )
    imdb_votes = models.TextField(blank=True, default="")
    imdb_id = models.TextField(
        blank=True,
        default="",
        help_text="IMDB identifier (e.g., 'tt1375666')",
    )
    media_type = models.TextField(blank=True, default="")
    dvd = models.TextField(blank=True, default="")
    box_office = models.TextField(blank=True, default="")
    production = models.TextField(blank=True, default="")
    website = models.TextField(blank=True, default="")
    response = models.BooleanField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["title"], name="catalog_app_title_idx"),
        ]

    def __str__(self):
        if self.year:
            return f"{self.title} ({self.year})"
        return self.title

    @staticmethod
    def attribute_for(document_key: str) -> str | None:
        """Model attribute for a document key, or None for unknown keys."""
        return DOCUMENT_FIELDS.get(document_key)

    @staticmethod
    def document_key_for(attribute: str) -> str:
        for key, attr in DOCUMENT_FIELDS.items():
            if attr == attribute:
                return key
        return attribute

    def to_document(self) -> dict:
        document = {"_id": str(self.pk)}
        for key, attr in DOCUMENT_FIELDS.items():
            document[key] = getattr(self, attr)
        return document
