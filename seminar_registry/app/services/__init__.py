"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Callers go
through the ``SeminarGateway`` interface rather than the store, so the
simulated in‑memory gateway can later be swapped for a real backend
without changing API handlers.
"""
