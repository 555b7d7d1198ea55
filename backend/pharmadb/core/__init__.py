"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the rules that decide
      (reference checks, guard verdicts, merge plans, cascade order) live here,
      the services execute them against the database
"""
