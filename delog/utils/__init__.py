"""
delog utils - record formatting and reading log files back.
"""
