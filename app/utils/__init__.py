"""
Utility modules for the clientes API
"""
