"""
【业务说明】users 应用后台注册入口。
"""

from django.contrib import admin

from users.models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "wx_openid", "is_active", "is_staff", "created_at")
    search_fields = ("username", "wx_openid")
    list_filter = ("is_active", "is_staff")
    readonly_fields = ("created_at", "updated_at", "last_login")
    exclude = ("password",)
    ordering = ("-created_at",)
