"""Core model and services of the property mapper engine."""
