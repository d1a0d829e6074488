from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path(
        "questionnaire/<int:questionnaire_id>",
        views.questionnaire_detail,
        name="questionnaire_detail",
    ),
]
