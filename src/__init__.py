"""Application Layer.

Infrastructure and application services that orchestrate domain logic.
This layer handles file I/O and exposes the GeoidLookup query facade.
"""
