"""Terminal records manager for students, teachers and courses kept in text files."""

__version__ = "1.1.0"