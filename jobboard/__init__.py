"""
JobBoard Domain Store
Candidates browse and apply, employers post and manage pipelines,
admins moderate listings.
"""
__version__ = "1.0.0"
