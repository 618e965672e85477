"""Solvers for classic algorithmic puzzles: sequences, dynamic programming, searches, graphs, flows, trees and string matching."""

__version__ = "0.1.0"