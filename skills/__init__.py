"""
Skills app

Purpose: Store the flat skill inventory and the ATS keyword categories used
to steer generated text toward the vocabulary of each target role.
"""
