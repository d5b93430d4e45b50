"""Snake board snapshots, directions and head-to-food routing."""
