from django.urls import re_path

from . import views

app_name = "system_info"

urlpatterns = [
    re_path(r"^health/?$", views.health, name="health"),
    re_path(r"^info/?$", views.info, name="info"),
    re_path(r"^version/?$", views.version, name="version"),
    re_path(r"^metrics/?$", views.metrics, name="metrics"),
]
