"""
Built-in commands package.

Each builtin lives in its own subdirectory whose __init__.py registers the
command using @builtin_registry.register(). The subdirectories can be copied
to ~/.tinysh/commands/ as a starting point for user builtins.
"""
