"""Module: __init__.py

Date: 2026-10-18

Pure Python signal/observer helpers used by the background workers.
"""

from dateprefix.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
