"""A boss-battle arcade game: game rules, bosses, screens and a pygame main loop."""

__version__ = "0.1.0"