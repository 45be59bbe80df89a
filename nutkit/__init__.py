"""Key hashing, server distribution, a chained hash table and event polling for caching proxies."""

__version__ = "0.1.0"