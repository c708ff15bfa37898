"""
Web adapters that expose a CounterStore over HTTP.
"""

from .fasthtml import register_counter_routes, parse_interval_seconds, snapshot_events

__all__ = ["register_counter_routes", "parse_interval_seconds", "snapshot_events"]
