"""Core infrastructure: config, logging, exceptions, protocols and wiring."""
