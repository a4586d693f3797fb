"""Database layer: declarative base, sessions and transaction helpers."""
