"""Plugins shipped with rsforge and registered by default."""
