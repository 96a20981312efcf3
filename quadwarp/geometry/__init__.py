"""Point, rectangle and matrix primitives."""
