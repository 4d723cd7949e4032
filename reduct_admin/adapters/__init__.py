"""Adapter package for external I/O implementations.

Purpose:
    Collect the concrete token API client, its request builders and response
    interpreter, and the ``requests`` transport behind ``HttpTransport``.

Call context:
    Imported by ``reduct_admin.utils.settings`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
