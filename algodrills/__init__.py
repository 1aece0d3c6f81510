"""Classic array, string, interval, geometry and trie algorithms with small data-structure designs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "containers",
    "filesystem",
    "geometry",
    "intervals",
    "sums",
    "text",
    "trees",
    "tries",
    "windows",
    "words",
]