"""Test suite for the storefront domain core.

- unit/: Unit tests for domain, application, infrastructure and core modules
"""
