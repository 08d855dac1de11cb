"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that framework errors
are answered with the same rendered status pages.
"""
