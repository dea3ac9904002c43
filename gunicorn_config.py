"""Gunicorn configuration for production."""
import multiprocessing
import os

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"

# Workers share one MongoClient and one Redis pool per process, both thread-safe
workers_env = os.getenv("GUNICORN_WORKERS")
workers = int(workers_env) if workers_env else min(max(multiprocessing.cpu_count(), 2), 8)
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 30
keepalive = 5
graceful_timeout = 30

# Logging goes to stdout
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

proc_name = "tweets"
daemon = False
