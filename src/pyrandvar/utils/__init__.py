"""Utility types for pyrandvar.

This module contains type definitions shared across the package:

- numpy array aliases used in signatures
- Protocols for density functions and proposal kernels
"""
