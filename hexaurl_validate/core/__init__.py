"""
Core validation logic: error types, rules and the validation engine.
"""
