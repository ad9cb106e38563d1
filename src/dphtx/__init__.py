"""dphtx: naming-convention lint rules for Sketch documents."""

__version__ = "0.1.0"
