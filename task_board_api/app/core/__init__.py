"""Settings, logging, middleware, errors and database helpers."""
