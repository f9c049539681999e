"""Infrastructure Layer: configuration loading and logging setup.

Connects the cache facades to the environment they run in. Storage backends
are supplied by the application and are not part of this package.
"""
