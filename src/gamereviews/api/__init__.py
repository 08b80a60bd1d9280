"""
HTTP application
"""
