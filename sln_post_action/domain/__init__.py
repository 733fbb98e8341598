"""Domain layer.

Entities describing template creation results and post-action declarations,
plus the pure services that locate solution files and resolve project files.
"""
