"""
Client configuration: defaults, YAML overrides, and validation.
"""
