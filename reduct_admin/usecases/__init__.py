"""Use-case layer for token administration workflows.

Each module coordinates domain objects and ports without performing transport
I/O directly.
"""
