"""
Jobs app

Purpose: Job agent that tailors resumes, cover letters and application
answers to a job posting from the stored career data.
"""
