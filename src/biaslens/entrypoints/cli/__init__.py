"""BIASLENS command-line interface."""
