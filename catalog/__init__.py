"""
Catalog - Backend de gestion de catalogue (produits, categories, comptes).

Ce package expose les operations CRUD et de recherche sur les produits,
les categories et les comptes utilisateurs.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (cas d'utilisation, mapping DTO, normalisation des erreurs)
- infrastructure/ : Persistance SQLModel et hachage des mots de passe
- web/ : API HTTP FastAPI (couche de transport)
"""

__version__ = "0.1.0"
