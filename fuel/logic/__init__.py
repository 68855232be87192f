"""Core planning logic layer.

Subpackages:
- planning: meal library, day builder and week planner
- hydration: weight-based water targets
- taper: competition taper checklist
- shopping: grocery list aggregation
- reporting: nutrition totals
- guidance: static caffeine / substitution / Ramadan advice

Every function here is pure: no I/O, no clock reads, no shared mutable state.
"""
__all__ = ["planning", "hydration", "taper", "shopping", "reporting", "guidance"]
