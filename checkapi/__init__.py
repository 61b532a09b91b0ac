"""
Domain Check API.

Public endpoint answering whether a domain is available and at which fee
tier, backed by an EPP domain check flow.
"""
