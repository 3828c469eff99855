"""Embedded documentation corpus."""
