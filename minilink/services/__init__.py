"""
Services module - MongoDB-backed stores for users, connections and jobs.
"""
