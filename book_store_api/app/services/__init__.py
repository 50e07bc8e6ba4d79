"""
Service layer abstraction.

Services encapsulate business logic and talk to a ``BookStore``
passed in by the caller, so handlers never touch the backing file
directly and tests can substitute an in‑memory store.
"""
