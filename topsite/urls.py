# topsite/urls.py
from django.urls import include, path

urlpatterns = [
    path("", include("toptracks.urls")),
]
