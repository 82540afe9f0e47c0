from .hashing import hash_value, md5_hash

__all__ = [
    "md5_hash",
    "hash_value",
]
