"""code-bundle: order source files by their @requires directives and concatenate them."""

__version__ = "0.1.0"
