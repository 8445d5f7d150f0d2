"""Core business logic layer.

Subpackages:
- schedule: time helpers, per-day projection and weekly grid layout
- importing: CSV bulk import
- quick_add: batch creation from one time/day selection
- theme: preset colors and CSS variable computation

Everything here is synchronous and free of I/O.
"""
__all__ = ["schedule", "importing", "quick_add", "theme"]
