"""
Tweet sources.
"""
