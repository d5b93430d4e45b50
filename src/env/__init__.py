"""YAML-backed pathfinder settings."""
