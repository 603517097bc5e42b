"""
Project blueprint planner.

Asks a generative model for a project blueprint and recovers a validated,
typed document from whatever text comes back.
"""

__version__ = "0.5.0"
