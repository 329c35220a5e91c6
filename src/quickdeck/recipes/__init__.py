"""Built-in conversion recipes."""
