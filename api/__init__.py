"""HTTP host for tksq."""
