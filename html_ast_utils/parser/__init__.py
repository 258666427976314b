"""
html5lib-backed parsing and serialization for the node model.
"""

from .html_parser import HTMLParser
from .serializer import TreeSerializer, TreeWalker

__all__ = ['HTMLParser', 'TreeSerializer', 'TreeWalker']
