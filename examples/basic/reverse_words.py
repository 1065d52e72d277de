"""Reverse every word, keep the spacing: one call, zero config."""

from maxo import transform

print(transform("  streaming   scanners are fun  "))
