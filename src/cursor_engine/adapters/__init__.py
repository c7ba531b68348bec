"""Adapters embedding the engine in host UI toolkits."""
