"""Entry points into BIASLENS (currently the command-line interface)."""
