"""
Gunicorn configuration for the Dogs API production server.

The port comes from the same Settings the app uses: PORT when set,
otherwise 3001 under APP_ENV=test and 3000 elsewhere.
Env vars that override defaults:
  WORKERS  — number of worker processes (default: 2)
"""
import os

from dogs_api.core.config import Settings

_settings = Settings()

wsgi_app = "dogs_api.main:app"

bind = f"{_settings.HOST}:{_settings.port}"

# 2 workers is safe for a 512 MB container.
workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

# Keep connections alive for 5 s between requests.
keepalive = 5

# Kill a worker that hasn't responded in 120 s.
timeout = 120

loglevel = _settings.LOG_LEVEL.lower()
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

# Graceful restart: wait up to 30 s for in-flight requests to finish.
graceful_timeout = 30
