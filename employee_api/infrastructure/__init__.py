"""Infrastructure Layer — upstream HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - All transport failures mapped to core errors before leaving this layer
"""
