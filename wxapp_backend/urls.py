"""
URL configuration for wxapp_backend project.

小程序接口统一挂在 /api/ 下，后台管理挂在 /admin/。
"""
from django.contrib import admin
from django.urls import include, path

admin.site.site_header = "问卷小程序后台"
admin.site.site_title = "问卷小程序"
admin.site.index_title = "后台管理首页"


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("counter.urls")),
    path("api/", include("wx.urls")),
    path("api/", include("core.urls")),
    path("api/", include("answers.urls")),
]
