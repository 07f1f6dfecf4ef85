"""
Projects app

Purpose: Store portfolio projects written up as overview, challenge,
approach, outcome and impact.
"""
