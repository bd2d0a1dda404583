"""Integration method codes, math helpers, expression trees and their rewrites, and parameter and compartment state for reaction models."""

__version__ = "0.1.0"