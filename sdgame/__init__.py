"""Building blocks for 2D games: vectors, colours, timing, states, input, cameras, sprite batching, fonts and scenes."""

__version__ = "0.1.0"