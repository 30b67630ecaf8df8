"""Deploy the Navoiy-Terra corpus to GitHub."""

__version__ = "1.0.0"
