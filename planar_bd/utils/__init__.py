"""
Shared constants and helper utilities.

Centralizes the arm geometry defaults, angle ranges, and small stateless
numeric helpers used across the planar_bd package.
"""
