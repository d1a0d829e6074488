from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    【业务说明】Django App 配置，集中用户账号模型。
    【用法】settings INSTALLED_APPS 中列出 'users' 即可。
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'
    verbose_name = '用户'
