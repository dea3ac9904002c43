"""WSGI entry point: gunicorn -c gunicorn_config.py wsgi:app"""
from tweets import create_app

app = create_app()
