"""
Accounts app

Purpose: Own the career data, issue signed bearer tokens, and track how many
tokens and words the writing assistant has produced for each user.
"""
