"""Domain services.

Pure logic with no direct I/O; filesystem access goes through FileSystemPort.
"""
