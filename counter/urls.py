from django.urls import path

from counter import views

app_name = "counter"

urlpatterns = [
    path("health", views.health, name="health"),
    path("count", views.count, name="count"),
]
