"""crew-ping CLI: command-line interface for operators."""
