"""Extract text from images through null, local-program and HTTP embossers."""

__version__ = "0.1.0"

__all__ = ["emboss", "null_embosser", "local_embosser", "http_embosser", "cli"]