"""Feature modules: file scaffolding and database runners."""
