"""coachdiff: player performance profiles compared against rank benchmarks."""

__version__ = "0.1.0"
