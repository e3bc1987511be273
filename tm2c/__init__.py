"""Building blocks of a distributed software transactional memory: lock tables, write sets, allocators, hashing and profiling."""

__version__ = "0.1.0"