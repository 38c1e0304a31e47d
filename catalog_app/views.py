"""
Server-rendered pages for browsing and editing the catalog.

These views never answer with an error status: failures are rendered as the
error page or as an inline message on the search form.
"""

import logging

from django.conf import settings
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from catalog_app.services.movie_store import get_movie_store
from catalog_app.services.store_result import StoreOutcome, StoreResult

logger = logging.getLogger(__name__)


def _render_error(request, message: str, error: str | None = None):
    context = {"title": "Error", "message": message}
    if error:
        context["error"] = error
    return render(request, "catalog_app/error.html", context)


@require_GET
def home(request):
    return render(request, "catalog_app/home.html", {"title": "Movie Database Management System"})


@require_GET
def movie_list(request):
    """Return the first page of movies."""
    result = get_movie_store().list_all(settings.CATALOG_PAGE_SIZE)
    if not result.ok:
        return _render_error(request, "Error fetching movies", result.error)
    return render(
        request,
        "catalog_app/movies_list.html",
        {"title": "All Movies", "movies": result.movies},
    )


@require_http_methods(["GET", "POST"])
def movie_search(request):
    """Show the search form, or look up one movie by id, Movie_ID or title."""
    if request.method == "GET":
        return render(request, "catalog_app/search_movie.html", {"title": "Search Movie"})

    search_type = request.POST.get("searchType", "")
    search_value = request.POST.get("searchValue", "")
    store = get_movie_store()

    if search_type == "id":
        result = store.get_by_primary_key(search_value)
    elif search_type == "movieId":
        result = store.get_by_movie_id(search_value)
    elif search_type == "title":
        result = store.get_by_title_substring(search_value)
    else:
        logger.info(f"Unknown search type '{search_type}'")
        result = StoreResult.not_found()

    if result.outcome is StoreOutcome.STORE_ERROR:
        return _render_error(request, "Error searching movie", result.error)
    if not result.ok:
        return render(
            request,
            "catalog_app/search_movie.html",
            {"title": "Search Movie", "error": "Movie not found"},
        )
    return render(
        request,
        "catalog_app/movie_detail.html",
        {"title": result.movie.title, "movie": result.movie},
    )


@require_http_methods(["GET", "POST"])
def movie_add(request):
    if request.method == "GET":
        return render(request, "catalog_app/add_movie.html", {"title": "Add New Movie"})

    result = get_movie_store().create(request.POST.dict())
    if not result.ok:
        return _render_error(request, "Error adding movie", result.error)
    return redirect("movie_list")


@require_http_methods(["GET", "POST"])
def movie_update(request, pk):
    store = get_movie_store()

    if request.method == "GET":
        result = store.get_by_primary_key(pk)
        if result.outcome is StoreOutcome.NOT_FOUND:
            return _render_error(request, "Movie not found")
        if not result.ok:
            return _render_error(request, "Error fetching movie", result.error)
        return render(
            request,
            "catalog_app/update_movie.html",
            {"title": "Update Movie", "movie": result.movie},
        )

    # A missing movie still goes back to the list
    result = store.update_by_primary_key(pk, request.POST.dict())
    if result.outcome in (StoreOutcome.VALIDATION_ERROR, StoreOutcome.DUPLICATE_KEY, StoreOutcome.STORE_ERROR):
        return _render_error(request, "Error updating movie", result.error)
    return redirect("movie_list")
