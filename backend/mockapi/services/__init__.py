"""Services Layer: the user store and the request handlers built on it.

Invariants:
    - UserStore is the only owner of the collection and the id counter
    - Handlers receive their store by injection, never by import
"""
