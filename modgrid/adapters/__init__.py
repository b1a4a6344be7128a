"""Adapter package for concrete port implementations.

Purpose:
    Collect implementations of domain ports that turn layout state into
    external artifacts (generated markup and stylesheets).

Call context:
    Imported by ``modgrid.app.controller`` for runtime wiring and by tests.
"""
