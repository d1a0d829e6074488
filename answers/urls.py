from django.urls import path

from answers import views

app_name = "answers"

urlpatterns = [
    path("submit-answer", views.submit_answer, name="submit_answer"),
]
