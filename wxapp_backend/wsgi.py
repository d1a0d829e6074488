"""WSGI 入口，供 gunicorn 加载。"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "wxapp_backend.settings")

application = get_wsgi_application()
