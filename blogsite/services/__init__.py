# blogsite/services/__init__.py
"""
Clientes de servicios externos (relay de correo y Cloudinary).
Se instancian una sola vez en blogsite.extensions.
"""
