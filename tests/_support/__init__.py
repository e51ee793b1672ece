"""
Test support utilities for petclinic tests.

Helpers that don't fit as pytest fixtures but are shared across test files
live in ``tests._support.fakes``.
"""
