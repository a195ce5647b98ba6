"""Domain layer — type definitions, resolution, and struct rendering.

Pure code: no I/O, no configuration lookups.
"""
