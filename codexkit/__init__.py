"""Data structures, binary serializers and a strict .env parser."""

__version__ = "0.1.0"

__all__ = ["array", "comparator", "dotenv", "iterators", "linked_list", "rbtree", "serializer"]