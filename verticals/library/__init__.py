"""Library vertical - lending library reference implementation.

Wires the lending patterns together in one domain:
- Lazily-opened facade over the in-memory catalog
- FastAPI router with book and lending endpoints
- Pydantic request/response schemas
- Plain-text renderer and console demo
- Dataclass configuration from the environment
"""
