"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et la taxonomie d'erreurs du domaine.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (SQLModel, FastAPI, BDD).

Sous-packages :
- entities/ : Entités métier (Product, Category, User, Role)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (PageRequest, Page, ProductFilter)
"""
