import os
import sys

# Add src directory to Python path so 'hearing_lists' package can be found
sys.path.append(os.path.join(os.getcwd(), 'src'))

wsgi_app = "hearing_lists.api.server:app"
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Requests re-read artefacts from disk, so workers hold no shared state.
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

preload_app = False
accesslog = "-"
errorlog = "-"
loglevel = "info"
timeout = 60
