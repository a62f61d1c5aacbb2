"""Concrete implementations of the BIASLENS interfaces."""
