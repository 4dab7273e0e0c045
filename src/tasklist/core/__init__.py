"""Front-end agnostic core: ports, list presenter and app state."""
