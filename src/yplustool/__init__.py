"""Y+ first layer height calculator for CFD meshing."""
__version__ = "0.1.0"
