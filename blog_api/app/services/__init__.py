"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services are
constructed with the store they operate on, so the in‑memory store
used here can be swapped for another backend without changing API
handlers.
"""
