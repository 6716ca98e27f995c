"""Advent of Code 2023 puzzles on a shared grid model, path search and cycle-detecting simulator."""
