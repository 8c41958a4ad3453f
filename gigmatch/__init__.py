"""Keyword-driven job matching for freelance gig postings."""

__version__ = "0.3.0"
