# gunicorn_config.py
import multiprocessing
import os

# 监听地址和端口（云托管默认 80）
bind = f"0.0.0.0:{os.getenv('PORT', '80')}"

wsgi_app = "wxapp_backend.wsgi:application"

# 工作进程数：公式通常为 (2 * CPU核心数) + 1
workers = multiprocessing.cpu_count() * 2 + 1

worker_class = 'sync'

# 日志输出到标准输出，交给容器收集
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = 'gunicorn_wxapp_backend'

# 登录接口会请求微信服务器，超时需覆盖 WX_HTTP_TIMEOUT
timeout = 30
