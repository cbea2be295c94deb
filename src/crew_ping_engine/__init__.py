"""Candidate targeting and application drafting engines for crew-ping."""
