"""
Small-step operational semantics for the SIMPLE language.
"""
