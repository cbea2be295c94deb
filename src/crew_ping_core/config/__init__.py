"""Configuration for crew-ping."""
