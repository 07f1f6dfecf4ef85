"""
Experience app

Purpose: Store the work history, one row per position, tagged with the role
types each position supports.
"""
