"""Small programs and data structures: palindromes, base-4 numbers, polygons, containers and character battles."""

__version__ = "1.0.0"