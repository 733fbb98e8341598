"""Infrastructure layer.

Adapters implementing the application ports: the physical filesystem, the
dotnet CLI, console logging and the JSON document repositories.
"""
