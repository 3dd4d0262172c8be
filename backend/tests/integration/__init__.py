"""
Integration tests package.

Exercises the full request path (Flask app, error handlers, service and
in-memory repository) without mocks.
"""
