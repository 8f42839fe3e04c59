"""Inflation-aware savings goal planner."""
