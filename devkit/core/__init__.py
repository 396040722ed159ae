"""Core components - settings, logging, exceptions and the profile store."""
