"""Services Layer — DTO mapping and the async locomotive service.

Invariants:
    - Services own all IO (AsyncSession); query shaping is delegated to core/
"""
