"""huedial - max-chroma Display P3 colors around the Jzazbz hue wheel."""

__version__ = "0.1.0"
