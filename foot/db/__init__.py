"""Database Layer - declarative Base, standalone session factory and demo seed data."""
