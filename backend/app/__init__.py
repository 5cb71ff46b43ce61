"""Starter API Package — CRUD, transactional email and health routes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
