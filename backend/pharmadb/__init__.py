"""PharmaDB Application Package — pharmacy records with an integrity-enforcing mutation layer.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
