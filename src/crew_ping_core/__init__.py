"""Domain models, configuration and interfaces for crew-ping."""
