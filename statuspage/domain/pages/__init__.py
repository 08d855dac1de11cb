"""
Pages bounded context: domain layer.

This module contains all domain logic for status pages:
- Status catalog (descriptions, categories, themes)
- Language resolution from explicit override or Accept-Language
- The page view model handed to the template adapter
"""
