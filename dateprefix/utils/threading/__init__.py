"""Module: __init__.py

Date: 2026-10-18

Background worker base built on threading.Thread.
"""

from dateprefix.utils.threading.worker_base import WorkerBase

__all__ = ["WorkerBase"]
