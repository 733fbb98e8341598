"""Application layer.

Use cases orchestrating the domain services through ports, plus the
request/response models exchanged with the CLI.
"""
