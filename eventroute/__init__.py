"""Named-event dispatch engine: api contracts and runtime implementations."""
