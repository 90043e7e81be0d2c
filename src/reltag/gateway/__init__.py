"""Gateways wrapping external systems (git) behind testable interfaces."""
