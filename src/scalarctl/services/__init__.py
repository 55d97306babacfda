"""Service layer — adapts the pure domain to structured results.

INVARIANT: Services never raise for user input; every outcome is a
ServiceResult.
"""
