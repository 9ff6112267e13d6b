"""Employee API Package — REST facade over the upstream employee mock API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
