from django.contrib import admin

from .models import WechatSession


@admin.register(WechatSession)
class WechatSessionAdmin(admin.ModelAdmin):
    list_display = ("openid", "third_session", "expires_at")
    search_fields = ("openid", "third_session")
    readonly_fields = ("openid", "third_session", "session_key", "expires_at")
