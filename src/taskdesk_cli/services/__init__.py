"""Service layer for TaskDesk CLI.

Services sit between commands and the repository: boundary validation,
edit sessions and the pure presentation policy.
"""
