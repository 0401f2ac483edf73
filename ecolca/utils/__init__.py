"""Business logic: factor tables, calculation engine, editing, state and persistence."""
