# one worker: the attendee directory lives in process memory and
# /reload-database only refreshes the worker that serves it
workers = 1
worker_class = "uvicorn.workers.UvicornWorker"
wsgi_app = "app.main:app"
bind = "0.0.0.0:3000"
accesslog = "-"
errorlog = "-"
loglevel = "info"
