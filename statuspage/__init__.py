"""
StatusPage: localized HTTP status pages.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - pages: Status catalog, language resolution, page rendering.

Layers:
    - domain: Pure lookup tables, entities, ports (ABCs).
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (HTML templating) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
