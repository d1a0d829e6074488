from django.urls import path

from wx import views

app_name = "wx"

urlpatterns = [
    path("login", views.login, name="login"),
    path("wx_openid", views.wx_openid, name="wx_openid"),
    path("decrypt-user-data", views.decrypt_user_info, name="decrypt_user_data"),
]
