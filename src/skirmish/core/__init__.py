"""Core building blocks shared by the combat layer.

- data/: enums, rule constants and static class data
- events/: event bus and event definitions
- config.py: YAML-backed runtime configuration
"""
