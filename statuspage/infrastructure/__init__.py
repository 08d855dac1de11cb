"""
Infrastructure layer package.

Adapters implementing domain ports with concrete libraries.
"""
