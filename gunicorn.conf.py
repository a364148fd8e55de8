import os
import multiprocessing

# Scoring is pure and cheap; each sync worker keeps its own leaderboard cache

def calculate_workers():
    """
    Calculate worker count for the environment:
    Formula: min(4, max(2, cpu_count))
    """
    cpu_count = multiprocessing.cpu_count()
    return max(2, min(4, cpu_count))

workers = int(os.environ.get('WEB_CONCURRENCY', str(calculate_workers())))
worker_class = "sync"
max_requests = 1000
max_requests_jitter = 50
timeout = 30
keepalive = 5

# Binding
bind = "0.0.0.0:5000"

# Logging
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "mvp_leaderboard"

# Graceful timeout
graceful_timeout = 30

def when_ready(server):
    """Called once when the master process is ready"""
    server.log.info("MVP Leaderboard ready to serve requests")

def worker_int(worker):
    worker.log.info("Worker received INT or QUIT signal")

def pre_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)
