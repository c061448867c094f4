"""Compressed Rabin/Williams signatures over Blum integers."""
