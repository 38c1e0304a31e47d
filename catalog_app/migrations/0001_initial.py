"""Create the Movie table."""

import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Movie",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "movie_id",
                    models.IntegerField(
                        unique=True,
                        help_text="Externally supplied movie identifier",
                    ),
                ),
                ("title", models.TextField(help_text="Movie title")),
                (
                    "year",
                    models.PositiveIntegerField(blank=True, null=True, help_text="Release year"),
                ),
                ("rated", models.TextField(blank=True, default="")),
                (
                    "released",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Release date as published (e.g., '16 Jul 2010')",
                    ),
                ),
                ("runtime", models.TextField(blank=True, default="")),
                ("genre", models.TextField(blank=True, default="")),
                ("director", models.TextField(blank=True, default="")),
                ("writer", models.TextField(blank=True, default="")),
                ("actors", models.TextField(blank=True, default="")),
                ("plot", models.TextField(blank=True, default="")),
                ("language", models.TextField(blank=True, default="")),
                ("country", models.TextField(blank=True, default="")),
                ("awards", models.TextField(blank=True, default="")),
                (
                    "poster",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="URL to movie poster image",
                    ),
                ),
                (
                    "ratings",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="List of {'Source': ..., 'Value': ...} ratings",
                    ),
                ),
                ("metascore", models.TextField(blank=True, default="")),
                (
                    "imdb_rating",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0.0),
                            django.core.validators.MaxValueValidator(10.0),
                        ],
                        help_text="IMDB user rating (0.0-10.0)",
                    ),
                ),
                ("imdb_votes", models.TextField(blank=True, default="")),
                (
                    "imdb_id",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="IMDB identifier (e.g., 'tt1375666')",
                    ),
                ),
                ("media_type", models.TextField(blank=True, default="")),
                ("dvd", models.TextField(blank=True, default="")),
                ("box_office", models.TextField(blank=True, default="")),
                ("production", models.TextField(blank=True, default="")),
                ("website", models.TextField(blank=True, default="")),
                ("response", models.BooleanField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [models.Index(fields=["title"], name="catalog_app_title_idx")],
            },
        ),
    ]
