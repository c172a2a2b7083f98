"""
NoGo agents: search player, random baseline and configuration.
"""
