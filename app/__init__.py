"""
BluePay Clientes API
"""
