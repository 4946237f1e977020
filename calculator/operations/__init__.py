"""Operation plugins. Every module except `base` defines one Operation subclass."""
