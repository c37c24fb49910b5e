"""stronk: a 5/3/1 workout progression tracker."""

__version__ = "0.1.0"
