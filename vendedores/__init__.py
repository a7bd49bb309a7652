"""
MS-VENDEDORES - Microservicio de Gestión de Vendedores
"""
