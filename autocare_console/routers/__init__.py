"""
Page routers.
"""
