"""Classic data structures and algorithms: linked lists, queues, deques, heaps, trees and expression conversion."""

__version__ = "0.1.0"