"""Core Layer — record store and pure record rules, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation and normalization functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes translate
      StoreResult values into HTTP responses, the store never raises for
      expected outcomes
"""
