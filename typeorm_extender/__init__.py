"""typeorm-extender: scaffolding for migrations, factories and seeds."""

__version__ = "1.0.0"
