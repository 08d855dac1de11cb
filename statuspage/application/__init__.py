"""
Application layer package.

Contains use cases that orchestrate domain logic and ports.
No framework imports; adapters are injected through constructors.
"""
