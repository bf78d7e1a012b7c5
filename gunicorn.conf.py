"""
Gunicorn configuration for the Intern Tracker API.

Run with:  gunicorn tracker.main:app -c gunicorn.conf.py
Env vars that override defaults:
  PORT       — TCP port to bind
  WORKERS    — number of worker processes (default: 2)
  LOG_LEVEL  — gunicorn + app log level (default: info)
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The progress endpoints are CPU-light; 2 workers fit a 512 MB container.
workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 120

# Logging to stdout; tracker.* loggers are set up in tracker.core.logging.
loglevel = os.environ.get("LOG_LEVEL", "info")
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
