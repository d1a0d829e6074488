from django.contrib import admin

from answers.models import UserAnswer


@admin.register(UserAnswer)
class UserAnswerAdmin(admin.ModelAdmin):
    """答题记录只读，仅供查询。"""

    list_display = ("id", "user_id", "questionnaire_id", "question_id", "option_id", "obtained_score")
    list_filter = ("questionnaire",)
    search_fields = ("user__username", "user__wx_openid")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
