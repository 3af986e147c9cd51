"""Geoid Bounded Context.

Responsible for ellipsoid/geoid separation on the global EGM96 grid:
- Value Objects: GridSpec, GeoidGrid, GridCell, GeoPoint
- Services: locate_cell, bilinear_interpolate, geoid_offset
"""
