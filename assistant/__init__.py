"""
Assistant app

Purpose: Assemble role-relevant career context, render it into prompts, and
call the completion service for the inline writing assistant and the job
agent. Owns no models; it reads the record apps through a RecordStore.
"""
