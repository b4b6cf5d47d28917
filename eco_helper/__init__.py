"""
Eco Helper - Source Package

A small household resource tracker: log water and energy activities,
see today's totals with a potential-saving estimate, and get tips
ranked by what you have been logging.

DESIGN PRINCIPLES:
1. Validate at the boundary, never inside the store
2. The dashboard snapshot is rebuilt on every append; summary and
   tips are recomputed on every call
3. Aggregation and tip selection are pure functions
4. Every submission is audited
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Eco Helper Team"
