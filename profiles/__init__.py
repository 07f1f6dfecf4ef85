"""
Profiles app

Purpose: Hold the single career profile (personal info, positioning by role,
value propositions and mission) that every AI prompt starts from.
"""
