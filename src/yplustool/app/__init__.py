"""
The APP layer contains the Qt state store, the window and the bootstrap.
"""
