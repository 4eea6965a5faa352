"""CLI layer — error boundary, console output, and the demo program.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
