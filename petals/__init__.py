"""Petals Around the Rose - a console dice puzzle."""
