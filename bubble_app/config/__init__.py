"""
Process-wide configuration: defaults, optional YAML overrides, validation.
"""
