"""Merged NSE/BSE ticker list builder."""

__version__ = "1.0.0"
