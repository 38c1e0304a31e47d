"""
JSON API over the movie catalog.

Every response uses the envelope {success, data?, message?, error?, count?, errors?}.
Store outcomes are translated to status codes in _result_response only.
"""

import json
import logging

from django.conf import settings
from django.http import JsonResponse, QueryDict
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from catalog_app.forms import MovieCreateForm, MovieUpdateForm
from catalog_app.services.movie_store import get_movie_store
from catalog_app.services.store_result import FieldError, StoreOutcome, StoreResult

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = {"application/json", "application/vnd.api+json"}

STATUS_BY_OUTCOME = {
    StoreOutcome.OK: 200,
    StoreOutcome.NOT_FOUND: 404,
    StoreOutcome.DUPLICATE_KEY: 400,
    StoreOutcome.VALIDATION_ERROR: 400,
    StoreOutcome.STORE_ERROR: 500,
}


class MalformedBody(Exception):
    """Raised when a request body cannot be decoded."""

    pass


def _read_body(request) -> dict:
    if request.content_type in JSON_CONTENT_TYPES:
        if not request.body:
            return {}
        try:
            payload = json.loads(request.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedBody(str(e)) from e
        if not isinstance(payload, dict):
            raise MalformedBody("Expected a JSON object")
        return payload
    if request.method == "POST":
        return request.POST.dict()
    return QueryDict(request.body, encoding=request.encoding).dict()


def _errors_response(errors: list[FieldError]) -> JsonResponse:
    return JsonResponse({"success": False, "errors": [e.to_dict() for e in errors]}, status=400)


def _malformed_response(request, error: MalformedBody) -> JsonResponse:
    logger.warning(f"Malformed body on {request.method} {request.path}: {error}")
    return JsonResponse(
        {"success": False, "message": "Malformed JSON body", "error": str(error)},
        status=400,
    )


def _result_response(
    result: StoreResult,
    failure_message: str,
    success_message: str | None = None,
    success_status: int = 200,
) -> JsonResponse:
    """Build the envelope for a single-record StoreResult."""
    if result.ok:
        body = {"success": True}
        if success_message:
            body["message"] = success_message
        body["data"] = result.movie.to_document()
        return JsonResponse(body, status=success_status)

    status = STATUS_BY_OUTCOME[result.outcome]
    if result.outcome is StoreOutcome.NOT_FOUND:
        body = {"success": False, "message": "Movie not found"}
    elif result.outcome is StoreOutcome.DUPLICATE_KEY:
        body = {"success": False, "message": "Movie with this Movie_ID already exists"}
    elif result.outcome is StoreOutcome.VALIDATION_ERROR:
        body = {"success": False, "errors": [e.to_dict() for e in result.errors]}
    else:
        body = {"success": False, "message": failure_message, "error": result.error}
    return JsonResponse(body, status=status)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def movie_collection(request):
    """GET lists movies, POST creates one."""
    store = get_movie_store()

    if request.method == "GET":
        result = store.list_all(settings.CATALOG_API_LIST_LIMIT)
        if not result.ok:
            return _result_response(result, "Error fetching movies")
        return JsonResponse(
            {
                "success": True,
                "count": len(result.movies),
                "data": [movie.to_document() for movie in result.movies],
            }
        )

    try:
        fields = _read_body(request)
    except MalformedBody as e:
        return _malformed_response(request, e)

    form = MovieCreateForm(data=fields)
    if not form.is_valid():
        return _errors_response(form.field_errors())

    result = store.create(fields)
    return _result_response(
        result,
        "Error creating movie",
        success_message="Movie created successfully",
        success_status=201,
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def movie_by_primary_key(request, pk):
    store = get_movie_store()

    if request.method == "GET":
        return _result_response(store.get_by_primary_key(pk), "Error fetching movie")

    if request.method == "DELETE":
        return _result_response(
            store.delete_by_primary_key(pk),
            "Error deleting movie",
            success_message="Movie deleted successfully",
        )

    try:
        fields = _read_body(request)
    except MalformedBody as e:
        return _malformed_response(request, e)

    form = MovieUpdateForm(data=fields)
    if not form.is_valid():
        return _errors_response(form.field_errors())

    return _result_response(
        store.update_by_primary_key(pk, fields),
        "Error updating movie",
        success_message="Movie updated successfully",
    )


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def movie_by_movie_id(request, movie_id):
    store = get_movie_store()

    if request.method == "GET":
        return _result_response(store.get_by_movie_id(movie_id), "Error fetching movie")

    if request.method == "DELETE":
        return _result_response(
            store.delete_by_movie_id(movie_id),
            "Error deleting movie",
            success_message="Movie deleted successfully",
        )

    try:
        fields = _read_body(request)
    except MalformedBody as e:
        return _malformed_response(request, e)

    return _result_response(
        store.update_by_movie_id(movie_id, fields),
        "Error updating movie",
        success_message="Movie updated successfully",
    )


@require_http_methods(["GET"])
def movie_by_title(request, title):
    return _result_response(get_movie_store().get_by_title_substring(title), "Error fetching movie")
