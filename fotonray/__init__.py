"""Photon mapping building blocks: vectors, colours, transformations, rays, textures, sampling, kernels, tone mapping and planets."""

__version__ = "0.1.0"