"""
Pydantic value objects consumed and produced by the engines.
"""
