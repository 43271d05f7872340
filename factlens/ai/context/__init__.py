"""
clients for the external providers the pipeline talks to.
"""
