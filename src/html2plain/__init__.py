from html2plain.convert import convert

__all__ = ["convert"]
__version__ = "0.1.0"
