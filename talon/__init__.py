"""A small 2D game engine core: scene graph, components, physics, animation, input and editor logic."""

__version__ = "0.1.0"