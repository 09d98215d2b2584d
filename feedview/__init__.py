"""feedview - fetch one RSS/Atom feed and render it as a card list."""

__version__ = "0.1.0"
