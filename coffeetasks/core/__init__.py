"""Core wiring: configuration, lifespan, exception handlers, rate limits."""
