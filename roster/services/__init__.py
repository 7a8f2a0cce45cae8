"""Services Layer — startup routines that drive the store through its public API.

Invariants:
    - Services never touch RecordStore internals; every write goes through add()
"""
