"""Study modes: one stateless strategy per mode tag."""
