from django.urls import path, re_path

from catalog_app import api_views, views

# Every route also answers with a trailing slash; reversing yields the bare form.
urlpatterns = [
    path("", views.home, name="home"),
    re_path(r"^movies/all/?$", views.movie_list, name="movie_list"),
    re_path(r"^movies/search/?$", views.movie_search, name="movie_search"),
    re_path(r"^movies/add/?$", views.movie_add, name="movie_add"),
    re_path(r"^movies/update/(?P<pk>[^/]+)/?$", views.movie_update, name="movie_update"),
    re_path(r"^api/movies/?$", api_views.movie_collection, name="api_movie_collection"),
    re_path(
        r"^api/movies/movieid/(?P<movie_id>[^/]+)/?$",
        api_views.movie_by_movie_id,
        name="api_movie_by_movie_id",
    ),
    re_path(r"^api/movies/title/(?P<title>[^/]+)/?$", api_views.movie_by_title, name="api_movie_by_title"),
    re_path(r"^api/movies/(?P<pk>[^/]+)/?$", api_views.movie_by_primary_key, name="api_movie_by_primary_key"),
]
