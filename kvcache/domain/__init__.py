"""Domain Layer: contracts, value objects and exceptions.

Nothing in here talks to a storage system; the core and infrastructure layers
depend on these definitions, never the other way round.
"""
