"""Built-in plugins shipped with projgen."""
