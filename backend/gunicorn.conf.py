# gunicorn.conf.py
import os


def env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return int(default)


bind         = f"0.0.0.0:{os.environ.get('PORT', '8080')}"
worker_class = "gthread"
workers      = env_int("WEB_CONCURRENCY", 2)
threads      = env_int("GUNICORN_THREADS", 4)
timeout      = env_int("GUNICORN_TIMEOUT", 30)
loglevel     = os.environ.get("GUNICORN_LOGLEVEL", "info")
