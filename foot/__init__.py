"""Foot API Package - football matches, teams, players and goal scorers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
