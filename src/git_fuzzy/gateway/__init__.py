"""Gateways wrapping external tools."""
