"""markd: bookmark directories for easy directory-hopping."""

__version__ = "0.3.0"
