"""Manifest builder core: pattern scanning, hashing and manifest assembly."""
