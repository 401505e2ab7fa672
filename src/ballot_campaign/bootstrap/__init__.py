"""Bootstrap wiring: singletons shared by the API and entry points."""
