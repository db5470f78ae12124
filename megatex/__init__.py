"""Game-engine math, colours, font layout, image tiling, controller state and display-list bookkeeping."""

__version__ = "0.1.0"