"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas,
and input parsing. No business logic belongs here.
Routes call use cases and return responses.
"""
