from .physical_file_system import PhysicalFileSystem

__all__ = ["PhysicalFileSystem"]
