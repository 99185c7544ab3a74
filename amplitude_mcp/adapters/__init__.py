"""Infrastructure adapters implementing core protocols."""
