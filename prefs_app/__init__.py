"""Preferences window: settings bindings, page registry and sidebar navigation."""
