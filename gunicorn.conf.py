# Gunicorn configuration
# The store lives in process memory, so exactly one worker

bind = "0.0.0.0:10000"

# One worker: a second one would hold a diverging copy of the store
workers = 1

worker_class = "uvicorn.workers.UvicornWorker"

timeout = 120

graceful_timeout = 30

keepalive = 5

loglevel = "info"

accesslog = "-"

errorlog = "-"
