"""
Unit tests package.

Contains isolated unit tests for domain values, the repository, the
service, validation helpers and the HTTP controllers (with a mocked service).
"""
