"""Built-in plugins shipped with dphtx."""
