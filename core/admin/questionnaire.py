"""Admin for Questionnaire system."""

from django.contrib import admin, messages

from core.models import Option, Question, Questionnaire


class OptionInline(admin.TabularInline):
    """题目选项内联编辑（显示在题目详情页）。"""

    model = Option
    extra = 0
    fields = ("sort_order", "option_text", "score", "is_correct")
    ordering = ("sort_order",)


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    """题目管理，支持选项内联。"""

    list_display = (
        "text_preview",
        "questionnaire",
        "sub_type",
        "question_type",
        "weight",
        "sort_order",
    )
    list_filter = ("questionnaire", "question_type", "sub_type")
    search_fields = ("question_text", "questionnaire__title")
    ordering = ("questionnaire", "sort_order")
    inlines = [OptionInline]
    autocomplete_fields = ["questionnaire"]

    def text_preview(self, obj):
        text = obj.question_text
        return text[:50] + "..." if len(text) > 50 else text

    text_preview.short_description = "题目内容"


class QuestionInline(admin.TabularInline):
    """问卷题目内联编辑（显示在问卷详情页）。"""

    model = Question
    extra = 0
    fields = ("sort_order", "question_text", "question_type", "sub_type", "weight")
    ordering = ("sort_order",)
    show_change_link = True  # 跳转到题目详情页编辑选项


@admin.register(Questionnaire)
class QuestionnaireAdmin(admin.ModelAdmin):
    list_display = ("title", "version", "is_published", "updated_at")
    search_fields = ("title",)
    list_filter = ("is_published",)
    actions = ("mark_published", "mark_unpublished")
    inlines = [QuestionInline]

    @admin.action(description="发布问卷")
    def mark_published(self, request, queryset):
        updated = queryset.update(is_published=True)
        self.message_user(request, f"已发布 {updated} 个问卷。", messages.SUCCESS)

    @admin.action(description="取消发布")
    def mark_unpublished(self, request, queryset):
        updated = queryset.update(is_published=False)
        self.message_user(request, f"已取消发布 {updated} 个问卷。", messages.SUCCESS)
