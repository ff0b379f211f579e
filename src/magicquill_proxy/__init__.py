"""Proxy HTTP para el Space de edición de imágenes MagicQuill."""

__version__ = "1.0.0"
