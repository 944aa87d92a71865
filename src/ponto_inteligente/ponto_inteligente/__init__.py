"""Ponto Inteligente package.

Feature modules (companies, employees, registration, entries) each follow the
same split: frozen dataclass models, a repository Protocol, a MySQL repository,
a service holding the rules and a thin Flask controller.
"""
