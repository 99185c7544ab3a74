"""Events domain: event model, builders and the analytics service."""
