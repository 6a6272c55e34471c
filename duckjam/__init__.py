"""A small duck-walking arcade game with menus, a splash screen and audio."""

__version__ = "0.1.0"