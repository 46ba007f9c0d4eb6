"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers.  The
in‑memory ``ListingStore`` used here can be swapped for a persistent
store exposing the same ``append``/``all`` contract without changing
the handlers.
"""
