# gunicorn.conf.py
"""
Gunicorn для production.

Запуск: gunicorn config.wsgi:application
"""

import multiprocessing
import os

from dotenv import load_dotenv

load_dotenv()

bind = f"0.0.0.0:{os.environ.get('PORT', '5000')}"
workers = int(os.environ.get('WEB_CONCURRENCY', multiprocessing.cpu_count() * 2 + 1))
timeout = int(os.environ.get('GUNICORN_TIMEOUT', '30'))

accesslog = '-'
errorlog = '-'
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()
