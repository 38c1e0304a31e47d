from django.urls import include, path

urlpatterns = [
    path("", include("catalog_app.urls")),
]
