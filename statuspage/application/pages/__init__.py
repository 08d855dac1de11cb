"""Use cases for the pages bounded context."""
