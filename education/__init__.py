"""
Education app
"""
