"""nodig: Obsidian vault -> normalized page model for static-site renderers"""

__version__ = "0.1.0"
