"""
CLI Commands
"""

from . import demo, inspect, sign, verify

__all__ = ["demo", "inspect", "sign", "verify"]
