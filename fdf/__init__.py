"""Wire-frame viewer for .fdf height maps, with map loading and rendering."""

__version__ = "0.1.0"