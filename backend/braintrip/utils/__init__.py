"""Small shared helpers (TTL cache, geo math, stable ids)."""
