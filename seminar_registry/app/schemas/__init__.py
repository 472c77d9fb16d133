"""
Pydantic schema definitions for API payloads.

Each domain (seminars, attendees, certificates) defines its own
Pydantic models.  Records returned by the store are frozen so callers
receive immutable values; a change produces a new record.
"""
