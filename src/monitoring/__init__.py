"""Pathfinder monitoring: events, bus, JSONL logger, logging setup."""
