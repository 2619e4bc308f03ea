"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from core/ catalogue logic except errors
"""
