"""Scripts ejecutables de inmomatch."""
