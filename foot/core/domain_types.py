"""Domain Types - rule constants shared by the wire schemas and the goal rules.

Invariants:
    - Goals are scored within [MIN_GOAL_MINUTE, MAX_GOAL_MINUTE], bounds inclusive
    - MIN_GOAL_MINUTE is enforced at the wire (pydantic), MAX_GOAL_MINUTE by
      core/goal_rules.py so it surfaces with its own message
"""

MIN_GOAL_MINUTE = 0
MAX_GOAL_MINUTE = 90
