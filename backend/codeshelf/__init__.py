"""CodeShelf: code snippet sharing backend with a heuristic complexity analyzer."""

__version__ = "1.0.0"
