"""pagegen -- scaffolding for Flutter apps built on the GetX convention."""

__version__ = "0.1.0"
