"""Tools domain: the advertised catalog, argument models and dispatcher."""
