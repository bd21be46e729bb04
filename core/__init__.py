"""Core - domain, application, data and infrastructure layers."""
