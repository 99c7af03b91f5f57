"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP clients for the
    store and feed APIs) used by use cases.

Dependencies:
    Individual submodules depend on ``requests`` and domain protocol
    definitions.

Call context:
    Imported by ``showcase.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
