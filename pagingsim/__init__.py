"""Paged virtual memory simulator with several page-table layouts and FIFO replacement."""

__version__ = "0.1.0"